import logging
from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.errors import to_http_exception
from app.core.dependencies import (
    get_current_user,
    get_workout_repository,
    get_workout_log_service,
    get_weekly_service,
)
from app.core.exceptions import WodBoardError
from app.models.profile import Profile
from app.repositories.workout_repository import WorkoutRepository
from app.schemas.workout import WodResponse, WorkoutRead, WorkoutBrief
from app.schemas.workout_log import WorkoutLogSubmit, WorkoutLogRead, WorkoutCompleteResponse
from app.services.weekly_service import WeeklyService
from app.services.workout_log_service import WorkoutLogService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/wod", response_model=WodResponse)
async def get_workout_of_the_day(
    day: Optional[date] = Query(None, description="Дата в формате YYYY-MM-DD, по умолчанию сегодня"),
    current_user: Profile = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repository)
):
    day = day or datetime.utcnow().date()
    try:
        workout = await workouts.get_wod(day)
    except WodBoardError as e:
        raise to_http_exception(e)

    return WodResponse(
        day=day,
        workout=WorkoutRead.model_validate(workout) if workout else None
    )


@router.get("/scheduled", response_model=List[WorkoutBrief])
async def get_scheduled_workouts(
    current_user: Profile = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repository)
):
    """Предстоящие тренировки начиная с сегодняшнего дня"""
    try:
        return await workouts.get_scheduled(datetime.utcnow().date())
    except WodBoardError as e:
        raise to_http_exception(e)


@router.post("/{workout_id}/complete", response_model=WorkoutCompleteResponse)
async def complete_workout(
    workout_id: int,
    submission: WorkoutLogSubmit,
    current_user: Profile = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
    weekly: WeeklyService = Depends(get_weekly_service)
):
    """Записать и сразу завершить тренировку"""
    try:
        log = await service.complete_workout(current_user, workout_id, submission)
        completed = await weekly.completed_exercises(current_user, log.completed_at.date())
    except WodBoardError as e:
        raise to_http_exception(e)

    return WorkoutCompleteResponse(
        log=WorkoutLogRead.model_validate(log),
        completed_exercises=completed
    )


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: int,
    current_user: Profile = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repository)
):
    try:
        workout = await workouts.get_with_exercises(workout_id)
        if workout is None:
            raise HTTPException(status_code=404, detail=f"Тренировка {workout_id} не найдена")

        await workouts.delete(workout)
    except WodBoardError as e:
        raise to_http_exception(e)

    logger.info(f"Пользователь {current_user.id} удалил тренировку {workout_id}")
    return {"deleted": True, "id": workout_id}
