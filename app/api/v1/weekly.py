from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.errors import to_http_exception
from app.core.dependencies import get_current_user, get_weekly_service
from app.core.exceptions import WodBoardError
from app.models.profile import Profile
from app.schemas.weekly import WeeklyResponse
from app.services.weekly_service import WeeklyService

router = APIRouter()


@router.get("", response_model=WeeklyResponse)
async def get_weekly_exercises(
    week_start: Optional[date] = Query(None, description="Любая дата недели, по умолчанию текущая неделя"),
    current_user: Profile = Depends(get_current_user),
    service: WeeklyService = Depends(get_weekly_service)
):
    try:
        return await service.get_weekly_status(current_user, week_start or datetime.utcnow().date())
    except WodBoardError as e:
        raise to_http_exception(e)
