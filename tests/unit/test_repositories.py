"""
Модульные тесты репозиториев.

Сессия БД мокируется: проверяется, что любая ошибка SQLAlchemy
откатывает транзакцию и превращается в PersistenceFailure
с исходной ошибкой в __cause__, а не теряется.
"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError

from app.core.exceptions import PersistenceFailure
from app.repositories.base import persistence_guard
from app.repositories.profile_repository import ProfileRepository
from app.repositories.workout_log_repository import WorkoutLogRepository
from app.models import ExerciseScore
from tests.factories import make_log, make_profile

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_session() -> AsyncMock:
    session = AsyncMock()
    session.add = MagicMock()
    return session


def db_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


@pytest.mark.asyncio
async def test_persistence_guard_wraps_sqlalchemy_errors(mock_session):
    error = db_error()
    with pytest.raises(PersistenceFailure) as exc_info:
        async with persistence_guard(mock_session, "test action"):
            raise error

    assert exc_info.value.__cause__ is error
    assert exc_info.value.action == "test action"
    mock_session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_persistence_guard_leaves_other_errors_alone(mock_session):
    with pytest.raises(ValueError):
        async with persistence_guard(mock_session, "test action"):
            raise ValueError("not a db error")

    mock_session.rollback.assert_not_called()


@pytest.mark.asyncio
async def test_completed_between_fetch_failure_propagates(mock_session):
    mock_session.execute.side_effect = db_error()
    repo = WorkoutLogRepository(mock_session)

    with pytest.raises(PersistenceFailure):
        await repo.get_completed_between(datetime(2024, 3, 4), datetime(2024, 3, 5))


@pytest.mark.asyncio
async def test_profile_lookup_returns_scalar(mock_session):
    profile = make_profile(1)
    result = MagicMock()
    result.scalar_one_or_none.return_value = profile
    mock_session.execute.return_value = result

    assert await ProfileRepository(mock_session).get_by_id(1) is profile


@pytest.mark.asyncio
async def test_save_with_scores_replaces_sets_and_commits(mock_session):
    log = make_log(exercise_scores=[ExerciseScore(exercise_id=10, position=0, distance=100)])
    new_scores = [ExerciseScore(exercise_id=20, position=0, weight=50, reps=5)]

    saved = await WorkoutLogRepository(mock_session).save_with_scores(log, new_scores)

    assert saved is log
    assert [s.exercise_id for s in log.exercise_scores] == [20]
    mock_session.add.assert_called_once_with(log)
    mock_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_save_with_scores_commit_failure_rolls_back(mock_session):
    mock_session.commit.side_effect = db_error()

    with pytest.raises(PersistenceFailure):
        await WorkoutLogRepository(mock_session).save_with_scores(make_log(), [])

    mock_session.rollback.assert_awaited_once()
