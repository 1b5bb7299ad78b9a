from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends

from app.api.errors import to_http_exception
from app.core.dependencies import get_current_user, get_workout_log_service, get_weekly_service
from app.core.exceptions import WodBoardError
from app.models.profile import Profile
from app.schemas.workout_log import (
    StartWorkoutRequest,
    WorkoutLogSubmit,
    WorkoutLogRead,
    ResumeResponse,
    WorkoutCompleteResponse,
)
from app.services.weekly_service import WeeklyService
from app.services.workout_log_service import WorkoutLogService

router = APIRouter()


@router.post("", response_model=WorkoutLogRead)
async def start_workout_logging(
    request: StartWorkoutRequest,
    current_user: Profile = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service)
):
    """Начать тренировку (или вернуть уже начатую)"""
    try:
        return await service.start_logging(current_user, request.workout_id)
    except WodBoardError as e:
        raise to_http_exception(e)


@router.get("/incomplete", response_model=List[WorkoutLogRead])
async def get_incomplete_logs(
    current_user: Profile = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service)
):
    try:
        return await service.list_incomplete(current_user)
    except WodBoardError as e:
        raise to_http_exception(e)


@router.get("/{log_id}", response_model=ResumeResponse)
async def resume_workout_log(
    log_id: int,
    current_user: Profile = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service)
):
    """Состояние записи для продолжения тренировки"""
    try:
        log, exercises = await service.get_resume_state(current_user, log_id)
    except WodBoardError as e:
        raise to_http_exception(e)

    return ResumeResponse(log=WorkoutLogRead.model_validate(log), exercises=exercises)


@router.put("/{log_id}", response_model=WorkoutLogRead)
async def save_workout_progress(
    log_id: int,
    submission: WorkoutLogSubmit,
    current_user: Profile = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service)
):
    try:
        return await service.save_progress(current_user, log_id, submission)
    except WodBoardError as e:
        raise to_http_exception(e)


@router.post("/{log_id}/complete", response_model=WorkoutCompleteResponse)
async def complete_workout_log(
    log_id: int,
    submission: WorkoutLogSubmit,
    current_user: Profile = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
    weekly: WeeklyService = Depends(get_weekly_service)
):
    try:
        log = await service.complete(current_user, log_id, submission)
        completed = await weekly.completed_exercises(current_user, log.completed_at.date())
    except WodBoardError as e:
        raise to_http_exception(e)

    return WorkoutCompleteResponse(
        log=WorkoutLogRead.model_validate(log),
        completed_exercises=completed
    )
