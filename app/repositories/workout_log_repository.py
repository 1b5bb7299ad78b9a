from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models.workout import Workout, WorkoutExercise
from app.models.workout_log import WorkoutLog, ExerciseScore
from app.repositories.base import persistence_guard


class WorkoutLogRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, log_id: int) -> Optional[WorkoutLog]:
        """Запись тренировки вместе с тренировкой, упражнениями и подходами."""
        async with persistence_guard(self.db, "get workout log"):
            result = await self.db.execute(
                select(WorkoutLog)
                .where(WorkoutLog.id == log_id)
                .options(
                    selectinload(WorkoutLog.workout)
                    .selectinload(Workout.workout_exercises)
                    .selectinload(WorkoutExercise.exercise),
                    selectinload(WorkoutLog.exercise_scores),
                )
            )
            return result.scalar_one_or_none()

    async def get_incomplete(self, user_id: int, workout_id: Optional[int] = None) -> List[WorkoutLog]:
        async with persistence_guard(self.db, "get incomplete workout logs"):
            query = (
                select(WorkoutLog)
                .where(WorkoutLog.user_id == user_id, WorkoutLog.completed_at.is_(None))
                .options(selectinload(WorkoutLog.workout))
                .order_by(WorkoutLog.created_at.desc())
            )
            if workout_id is not None:
                query = query.where(WorkoutLog.workout_id == workout_id)

            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def get_completed_between(
            self,
            start: datetime,
            end: datetime,
            user_id: Optional[int] = None
    ) -> List[WorkoutLog]:
        """Завершённые записи с completed_at в [start, end], с профилем и упражнениями тренировки."""
        async with persistence_guard(self.db, "get completed workout logs"):
            query = (
                select(WorkoutLog)
                .where(WorkoutLog.completed_at >= start, WorkoutLog.completed_at <= end)
                .options(
                    selectinload(WorkoutLog.profile),
                    selectinload(WorkoutLog.workout).selectinload(Workout.workout_exercises),
                )
                .order_by(WorkoutLog.completed_at.asc())
            )
            if user_id is not None:
                query = query.where(WorkoutLog.user_id == user_id)

            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def create(self, log: WorkoutLog) -> WorkoutLog:
        async with persistence_guard(self.db, "create workout log"):
            self.db.add(log)
            await self.db.commit()
            await self.db.refresh(log)
            return log

    async def save_with_scores(self, log: WorkoutLog, scores: List[ExerciseScore]) -> WorkoutLog:
        """
        Сохранить запись и все её подходы одной транзакцией.
        Ранее сохранённые подходы записи заменяются целиком.
        """
        async with persistence_guard(self.db, "save workout log"):
            # delete-orphan удалит подходы, которых нет в новом списке
            log.exercise_scores = list(scores)
            self.db.add(log)
            await self.db.commit()
            return log
