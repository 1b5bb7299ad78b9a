"""
E2E тесты полного цикла тренировки.

Сценарии:
1. регистрация → логин → старт тренировки → прогресс → завершение → лидерборд
2. истёкший access-токен → 401 на защищённых эндпоинтах

Стратегия: полный HTTP-стек через httpx.AsyncClient с настоящей
JWT-аутентификацией. Репозитории мокируются (AsyncMock), без реальной БД;
записи хранятся в словаре, чтобы шаги видели результат друг друга.
"""

import pytest
from datetime import datetime, timedelta

from app.models import Profile, WorkoutLog
from app.services.auth_service import auth_service
from tests.factories import make_workout

pytestmark = pytest.mark.e2e


@pytest.mark.asyncio
async def test_full_workout_flow(client, mock_profile_repo, mock_workout_repo, mock_log_repo):
    """
    E2E: пользователь регистрируется, выполняет тренировку дня и попадает в лидерборд.
    """
    user = Profile(
        id=42,
        email="e2e@test.com",
        password=auth_service.hash_password("securepass"),
        first_name="Eve",
        last_name="Doe",
        profile_name="e2euser",
        created_at=datetime.utcnow(),
    )
    workout = make_workout(workout_id=7)
    stored = {}

    mock_profile_repo.get_by_email.return_value = None
    mock_profile_repo.create_profile.return_value = user
    mock_profile_repo.get_by_id.return_value = user
    mock_workout_repo.get_wod.return_value = workout
    mock_workout_repo.get_with_exercises.return_value = workout

    async def create(log: WorkoutLog):
        log.id = 1
        log.workout = workout
        log.exercise_scores = []
        stored[log.id] = log
        return log

    async def get_by_id(log_id):
        return stored.get(log_id)

    async def get_incomplete(user_id, workout_id=None):
        return [log for log in stored.values() if log.completed_at is None]

    async def get_completed_between(start, end, user_id=None):
        return [
            log for log in stored.values()
            if log.completed_at is not None and start <= log.completed_at <= end
        ]

    mock_log_repo.create.side_effect = create
    mock_log_repo.get_by_id.side_effect = get_by_id
    mock_log_repo.get_incomplete.side_effect = get_incomplete
    mock_log_repo.get_completed_between.side_effect = get_completed_between

    # 1. Регистрация
    reg_response = await client.post("/api/v1/auth/register", json={
        "email": "e2e@test.com",
        "password": "securepass",
        "profile_name": "e2euser",
    })
    assert reg_response.status_code == 200

    # 2. Логин
    mock_profile_repo.get_by_email.return_value = user
    login_response = await client.post("/api/v1/auth/login", json={
        "email": "e2e@test.com",
        "password": "securepass",
    })
    assert login_response.status_code == 200
    headers = {"Authorization": f"Bearer {login_response.json()['access_token']}"}

    # 3. Тренировка дня
    wod_response = await client.get("/api/v1/workouts/wod", headers=headers)
    assert wod_response.status_code == 200
    assert wod_response.json()["workout"]["id"] == 7

    # 4. Старт; повторный старт возвращает ту же запись
    start_response = await client.post("/api/v1/logs", json={"workout_id": 7}, headers=headers)
    assert start_response.status_code == 200
    log_id = start_response.json()["id"]
    again = await client.post("/api/v1/logs", json={"workout_id": 7}, headers=headers)
    assert again.json()["id"] == log_id

    # 5. Промежуточное сохранение и продолжение
    progress = {"exercises": [{"exercise_id": 20, "sets": [{"weight": 70, "reps": 5}]}]}
    put_response = await client.put(f"/api/v1/logs/{log_id}", json=progress, headers=headers)
    assert put_response.status_code == 200
    assert put_response.json()["score"] == 70

    resume_response = await client.get(f"/api/v1/logs/{log_id}", headers=headers)
    squat = resume_response.json()["exercises"][1]
    assert [s["weight"] for s in squat["sets"]] == [70]

    # 6. Завершение
    final = {
        "notes": "готово",
        "exercises": [
            {"exercise_id": 10, "sets": [{"distance": 400}, {"distance": 400}]},
            {"exercise_id": 20, "sets": [{"weight": 70, "reps": 5}, {"weight": 80, "reps": 3}]},
        ],
    }
    complete_response = await client.post(f"/api/v1/logs/{log_id}/complete", json=final, headers=headers)
    assert complete_response.status_code == 200
    completed_log = complete_response.json()["log"]
    assert completed_log["score"] == 880
    assert completed_log["total"] == 800 + 70 * 5 + 80 * 3

    # 7. Завершённую запись изменить нельзя
    conflict = await client.put(f"/api/v1/logs/{log_id}", json=final, headers=headers)
    assert conflict.status_code == 409

    # 8. Лидерборд за сегодня
    stored[log_id].profile = user
    board = await client.get("/api/v1/leaderboard", params={"day": completed_log["completed_at"][:10]})
    assert board.status_code == 200
    rankings = board.json()["rankings"]
    assert len(rankings) == 1
    assert rankings[0]["display_name"] == "e2euser"
    assert rankings[0]["daily_score"] == 880


@pytest.mark.asyncio
async def test_expired_access_token_is_rejected(client, mock_profile_repo):
    """Истёкший access-токен не даёт доступа к защищённым эндпоинтам."""
    mock_profile_repo.get_by_id.return_value = Profile(id=1, email="u@test.com", password="hashed")
    expired = auth_service.create_access_token(data={"sub": "1"}, expires_delta=timedelta(seconds=-1))
    headers = {"Authorization": f"Bearer {expired}"}

    for path in ("/api/v1/auth/me", "/api/v1/logs/incomplete", "/api/v1/weekly"):
        response = await client.get(path, headers=headers)
        assert response.status_code == 401

    mock_profile_repo.get_by_id.assert_not_called()
