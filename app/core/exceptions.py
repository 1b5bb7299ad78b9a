"""
Доменные исключения WOD Board.

Сервисы и репозитории бросают эти исключения, роутеры переводят их
в HTTPException с нужным статусом. Ошибки хранилища (PersistenceFailure)
никогда не глотаются: лучше отказать целиком, чем вернуть неполный
лидерборд.
"""
from typing import Any, Dict, Optional


class WodBoardError(Exception):
    """Базовое исключение доменного уровня."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class PreconditionError(WodBoardError):
    """Операция невозможна без аутентифицированного пользователя."""


class WorkoutNotFound(WodBoardError):
    def __init__(self, workout_id: int):
        super().__init__(f"Тренировка {workout_id} не найдена", {"workout_id": workout_id})


class WorkoutLogNotFound(WodBoardError):
    def __init__(self, log_id: int):
        super().__init__(f"Запись тренировки {log_id} не найдена", {"log_id": log_id})


class WorkoutLogCompleted(WodBoardError):
    """Завершённая запись тренировки больше не изменяется."""

    def __init__(self, log_id: int):
        super().__init__(f"Запись тренировки {log_id} уже завершена", {"log_id": log_id})


class PersistenceFailure(WodBoardError):
    """Ошибка хранилища при чтении или записи. Исходная ошибка доступна в __cause__."""

    def __init__(self, action: str):
        super().__init__(f"Ошибка хранилища данных: {action}", {"action": action})
        self.action = action
