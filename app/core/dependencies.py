from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.models.profile import Profile
from app.repositories.profile_repository import ProfileRepository
from app.repositories.workout_repository import WorkoutRepository
from app.repositories.workout_log_repository import WorkoutLogRepository
from app.services.auth_service import auth_service
from app.services.weekly_service import WeeklyService
from app.services.workout_log_service import WorkoutLogService


security = HTTPBearer()


def get_profile_repository(db: AsyncSession = Depends(get_db)) -> ProfileRepository:
    """Фабрики репозиториев и сервисов подставляются в эндпоинты через Depends."""
    return ProfileRepository(db)


def get_workout_repository(db: AsyncSession = Depends(get_db)) -> WorkoutRepository:
    return WorkoutRepository(db)


def get_workout_log_repository(db: AsyncSession = Depends(get_db)) -> WorkoutLogRepository:
    return WorkoutLogRepository(db)


def get_workout_log_service(
        logs: WorkoutLogRepository = Depends(get_workout_log_repository),
        workouts: WorkoutRepository = Depends(get_workout_repository),
) -> WorkoutLogService:
    return WorkoutLogService(logs, workouts)


def get_weekly_service(
        logs: WorkoutLogRepository = Depends(get_workout_log_repository),
        workouts: WorkoutRepository = Depends(get_workout_repository),
) -> WeeklyService:
    return WeeklyService(logs, workouts)


async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Depends(security),
        repo: ProfileRepository = Depends(get_profile_repository),
) -> Profile:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Невалидный токен доступа",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user_id = auth_service.decode_user_id(credentials.credentials)
    if user_id is None:
        raise credentials_exception

    user = await repo.get_by_id(user_id)
    if user is None:
        raise credentials_exception

    return user
