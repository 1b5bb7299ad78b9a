"""
Жизненный цикл записи тренировки (WorkoutLog).

Запись создаётся, когда пользователь начинает тренировку, меняется только
владельцем, пока completed_at пуст, и становится неизменяемой после
завершения. score/total всегда пересчитываются из подходов через
ScoreCalculator.
"""
import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from app.core.exceptions import (
    PreconditionError,
    WorkoutNotFound,
    WorkoutLogNotFound,
    WorkoutLogCompleted,
)
from app.models.profile import Profile
from app.models.workout import Workout, WorkoutExercise
from app.models.workout_log import WorkoutLog, ExerciseScore
from app.repositories.workout_log_repository import WorkoutLogRepository
from app.repositories.workout_repository import WorkoutRepository
from app.schemas.workout_log import SetEntry, WorkoutLogSubmit, ExerciseLogState
from app.services.score_calculator import ScoreCalculator, ExerciseResult

logger = logging.getLogger(__name__)


def _exercise_name(workout_exercise: WorkoutExercise) -> Optional[str]:
    return workout_exercise.exercise.name if workout_exercise.exercise else None


def score_submission(
        workout: Workout,
        submission: WorkoutLogSubmit,
        user_id: int
) -> Tuple[ExerciseResult, List[ExerciseScore]]:
    """Посчитать score/total тренировки и подготовить строки exercise_scores."""
    by_exercise: Dict[int, WorkoutExercise] = {
        we.exercise_id: we for we in workout.workout_exercises
    }

    results = []
    rows: List[ExerciseScore] = []
    for exercise_log in submission.exercises:
        workout_exercise = by_exercise.get(exercise_log.exercise_id)
        if workout_exercise is None:
            logger.warning(
                f"Упражнение {exercise_log.exercise_id} не входит в тренировку {workout.id}, пропускаем"
            )
            continue

        category = ScoreCalculator.resolve_category(_exercise_name(workout_exercise), workout.type)
        results.append(ScoreCalculator.calculate(category, exercise_log.sets))

        for entry in exercise_log.sets:
            rows.append(ExerciseScore(
                user_id=user_id,
                exercise_id=exercise_log.exercise_id,
                position=len(rows),
                weight=entry.weight,
                reps=entry.reps,
                distance=entry.distance,
                time=entry.time,
                calories=entry.calories,
            ))

    return ScoreCalculator.combine(results), rows


def _prescribed_set(workout_exercise: WorkoutExercise) -> SetEntry:
    return SetEntry(
        weight=workout_exercise.weight or 0,
        reps=workout_exercise.reps,
        distance=workout_exercise.distance,
        time=workout_exercise.time,
        calories=workout_exercise.calories,
    )


def build_exercise_states(
        workout: Workout,
        saved_scores: Iterable[ExerciseScore]
) -> List[ExerciseLogState]:
    """
    Состояние логгера для продолжения тренировки.

    Для каждого упражнения берутся ранее сохранённые подходы, а если их нет,
    рекомендация тренировки повторяется `sets` раз.
    """
    saved_by_exercise: Dict[int, List[SetEntry]] = defaultdict(list)
    for score in sorted(saved_scores, key=lambda s: s.position or 0):
        entry = SetEntry.model_validate(score)
        if entry.weight is None:
            entry.weight = 0
        saved_by_exercise[score.exercise_id].append(entry)

    states = []
    for workout_exercise in workout.workout_exercises:
        sets = saved_by_exercise.get(workout_exercise.exercise_id)
        if not sets:
            sets = [_prescribed_set(workout_exercise) for _ in range(max(workout_exercise.sets or 0, 0))]

        name = _exercise_name(workout_exercise)
        states.append(ExerciseLogState(
            exercise_id=workout_exercise.exercise_id,
            exercise_name=name,
            category=ScoreCalculator.resolve_category(name, workout.type).value,
            sets=sets,
        ))
    return states


class WorkoutLogService:
    def __init__(self, logs: WorkoutLogRepository, workouts: WorkoutRepository):
        self.logs = logs
        self.workouts = workouts

    @staticmethod
    def _require_user(user: Optional[Profile]) -> None:
        if user is None:
            raise PreconditionError("Пользователь не авторизован")

    @staticmethod
    def _ensure_open(log: WorkoutLog) -> None:
        if log.completed_at is not None:
            raise WorkoutLogCompleted(log.id)

    async def get_owned_log(self, user: Profile, log_id: int) -> WorkoutLog:
        # Чужая запись для пользователя не существует
        log = await self.logs.get_by_id(log_id)
        if log is None or log.user_id != user.id:
            raise WorkoutLogNotFound(log_id)
        return log

    async def start_logging(self, user: Optional[Profile], workout_id: int) -> WorkoutLog:
        """Начать тренировку или вернуть уже начатую незавершённую запись."""
        self._require_user(user)

        workout = await self.workouts.get_with_exercises(workout_id)
        if workout is None:
            raise WorkoutNotFound(workout_id)

        existing = await self.logs.get_incomplete(user.id, workout_id=workout.id)
        if existing:
            return await self.get_owned_log(user, existing[0].id)

        log = await self.logs.create(WorkoutLog(
            user_id=user.id,
            workout_id=workout.id,
            notes="",
            score=0,
            total=0,
            created_at=datetime.utcnow(),
        ))
        logger.info(f"Пользователь {user.id} начал тренировку {workout.id} (запись {log.id})")
        return await self.get_owned_log(user, log.id)

    async def list_incomplete(self, user: Optional[Profile]) -> List[WorkoutLog]:
        self._require_user(user)
        return await self.logs.get_incomplete(user.id)

    async def get_resume_state(
            self,
            user: Optional[Profile],
            log_id: int
    ) -> Tuple[WorkoutLog, List[ExerciseLogState]]:
        self._require_user(user)
        log = await self.get_owned_log(user, log_id)
        if log.workout is None:
            raise WorkoutNotFound(log.workout_id)
        return log, build_exercise_states(log.workout, log.exercise_scores)

    async def save_progress(
            self,
            user: Optional[Profile],
            log_id: int,
            submission: WorkoutLogSubmit
    ) -> WorkoutLog:
        self._require_user(user)
        log = await self.get_owned_log(user, log_id)
        self._ensure_open(log)
        return await self._apply(log, submission)

    async def complete(
            self,
            user: Optional[Profile],
            log_id: int,
            submission: WorkoutLogSubmit,
            completed_at: Optional[datetime] = None
    ) -> WorkoutLog:
        self._require_user(user)
        log = await self.get_owned_log(user, log_id)
        self._ensure_open(log)

        log = await self._apply(log, submission, completed_at or datetime.utcnow())
        logger.info(f"Пользователь {user.id} завершил запись {log.id}: score={log.score}, total={log.total}")
        return log

    async def complete_workout(
            self,
            user: Optional[Profile],
            workout_id: int,
            submission: WorkoutLogSubmit,
            completed_at: Optional[datetime] = None
    ) -> WorkoutLog:
        """
        Завершить тренировку за один шаг.

        Незавершённая запись по этой тренировке закрывается; если её нет,
        новая запись вместе с подходами сохраняется одной транзакцией.
        """
        self._require_user(user)

        workout = await self.workouts.get_with_exercises(workout_id)
        if workout is None:
            raise WorkoutNotFound(workout_id)

        existing = await self.logs.get_incomplete(user.id, workout_id=workout.id)
        if existing:
            return await self.complete(user, existing[0].id, submission, completed_at)

        log = WorkoutLog(
            user_id=user.id,
            workout_id=workout.id,
            notes="",
            score=0,
            total=0,
            created_at=datetime.utcnow(),
        )
        log.workout = workout
        log = await self._apply(log, submission, completed_at or datetime.utcnow())
        logger.info(f"Пользователь {user.id} завершил тренировку {workout.id} (запись {log.id}): score={log.score}")
        return log

    async def _apply(
            self,
            log: WorkoutLog,
            submission: WorkoutLogSubmit,
            completed_at: Optional[datetime] = None
    ) -> WorkoutLog:
        if log.workout is None:
            raise WorkoutNotFound(log.workout_id)

        result, rows = score_submission(log.workout, submission, log.user_id)
        log.notes = submission.notes
        log.score = result.score
        log.total = result.total
        if completed_at is not None:
            log.completed_at = completed_at

        return await self.logs.save_with_scores(log, rows)
