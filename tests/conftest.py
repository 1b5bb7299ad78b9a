"""
Общие фикстуры для всех тестов WOD Board backend.

Стратегия:
- Тестовое FastAPI-приложение создаётся без startup-событий (нет подключения к БД).
- Репозитории заменяются на AsyncMock(spec=...) через dependency_overrides,
  поэтому сервисы работают по-настоящему, а хранилище - нет.
- get_current_user заменяется на лямбду с нужным пользователем.
- JWT-токены создаются через auth_service.create_access_token() для проверки middleware.
"""

import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from typing import AsyncGenerator

from app.api.router import api_router
from app.models import Profile
from app.repositories.profile_repository import ProfileRepository
from app.repositories.workout_repository import WorkoutRepository
from app.repositories.workout_log_repository import WorkoutLogRepository
from app.core.dependencies import (
    get_current_user,
    get_profile_repository,
    get_workout_repository,
    get_workout_log_repository,
)
from tests.factories import make_profile


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="WOD Board Test App")
    test_app.include_router(api_router, prefix="/api/v1")
    return test_app


# ---------------------------------------------------------------------------
# Фикстуры пользователей
# ---------------------------------------------------------------------------

@pytest.fixture
def user_fixture() -> Profile:
    """Обычный пользователь."""
    return make_profile(1, email="test@example.com", profile_name="tester")


@pytest.fixture
def other_user_fixture() -> Profile:
    return make_profile(2, email="other@example.com")


# ---------------------------------------------------------------------------
# Фикстуры для зависимостей
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_profile_repo() -> AsyncMock:
    return AsyncMock(spec=ProfileRepository)


@pytest.fixture
def mock_workout_repo() -> AsyncMock:
    repo = AsyncMock(spec=WorkoutRepository)
    repo.get_with_exercises.return_value = None
    repo.get_wod.return_value = None
    repo.get_scheduled.return_value = []
    repo.list_exercises.return_value = []
    return repo


@pytest.fixture
def mock_log_repo() -> AsyncMock:
    repo = AsyncMock(spec=WorkoutLogRepository)
    repo.get_by_id.return_value = None
    repo.get_incomplete.return_value = []
    repo.get_completed_between.return_value = []

    async def save_with_scores(log, scores):
        log.exercise_scores = list(scores)
        return log

    repo.save_with_scores.side_effect = save_with_scores
    return repo


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

def _override_repositories(app: FastAPI, profile_repo, workout_repo, log_repo) -> None:
    app.dependency_overrides[get_profile_repository] = lambda: profile_repo
    app.dependency_overrides[get_workout_repository] = lambda: workout_repo
    app.dependency_overrides[get_workout_log_repository] = lambda: log_repo


@pytest.fixture
async def client(mock_profile_repo, mock_workout_repo, mock_log_repo) -> AsyncGenerator[AsyncClient, None]:
    """
    Анонимный клиент: репозитории замоканы, get_current_user настоящий.
    Используется для auth-эндпоинтов и проверки 401/403.
    """
    app = create_test_app()
    _override_repositories(app, mock_profile_repo, mock_workout_repo, mock_log_repo)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def user_client(
    user_fixture, mock_profile_repo, mock_workout_repo, mock_log_repo
) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент, аутентифицированный как обычный пользователь.
    get_current_user → user_fixture.
    """
    app = create_test_app()
    _override_repositories(app, mock_profile_repo, mock_workout_repo, mock_log_repo)
    app.dependency_overrides[get_current_user] = lambda: user_fixture
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
