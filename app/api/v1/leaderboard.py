import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.errors import to_http_exception
from app.core.config import settings
from app.core.dependencies import get_workout_log_repository
from app.core.exceptions import PersistenceFailure
from app.repositories.workout_log_repository import WorkoutLogRepository
from app.schemas.leaderboard import LeaderboardResponse, RankableLog
from app.services.ranking_aggregator import RankingAggregator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    day: Optional[date] = Query(None, description="День рейтинга, по умолчанию сегодня"),
    limit: int = Query(settings.LEADERBOARD_LIMIT, ge=1, le=100),
    logs: WorkoutLogRepository = Depends(get_workout_log_repository)
):
    """Рейтинг пользователей по сумме очков за день"""
    day = day or datetime.utcnow().date()
    window_start, window_end = RankingAggregator.day_window(day)

    try:
        records = await logs.get_completed_between(window_start, window_end)
    except PersistenceFailure as e:
        # Неполные данные - неверный рейтинг, поэтому отказываем целиком
        logger.error(f"Не удалось загрузить лидерборд за {day}: {e}")
        raise to_http_exception(e)

    rankings = RankingAggregator.rank(
        [RankableLog.model_validate(record) for record in records],
        window_start,
        window_end,
        limit
    )
    return LeaderboardResponse(day=day, rankings=rankings)
