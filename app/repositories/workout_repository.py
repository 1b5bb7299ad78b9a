from datetime import date
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models.workout import Workout, Exercise, WorkoutExercise
from app.repositories.base import persistence_guard


def _with_exercises():
    return selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.exercise)


class WorkoutRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_with_exercises(self, workout_id: int) -> Optional[Workout]:
        async with persistence_guard(self.db, "get workout"):
            result = await self.db.execute(
                select(Workout)
                .where(Workout.id == workout_id)
                .options(_with_exercises())
            )
            return result.scalar_one_or_none()

    async def get_wod(self, day: date) -> Optional[Workout]:
        """Тренировка дня на указанную дату."""
        async with persistence_guard(self.db, "get workout of the day"):
            result = await self.db.execute(
                select(Workout)
                .where(Workout.is_wod == True, Workout.scheduled_date == day)  # noqa: E712
                .options(_with_exercises())
                .order_by(Workout.id)
                .limit(1)
            )
            return result.scalars().first()

    async def get_scheduled(self, from_day: date) -> List[Workout]:
        async with persistence_guard(self.db, "get scheduled workouts"):
            result = await self.db.execute(
                select(Workout)
                .where(Workout.scheduled_date >= from_day)
                .order_by(Workout.scheduled_date.asc(), Workout.id.asc())
            )
            return list(result.scalars().all())

    async def list_exercises(self) -> List[Exercise]:
        async with persistence_guard(self.db, "list exercises"):
            result = await self.db.execute(select(Exercise).order_by(Exercise.name.asc()))
            return list(result.scalars().all())

    async def delete(self, workout: Workout) -> None:
        async with persistence_guard(self.db, "delete workout"):
            await self.db.delete(workout)
            await self.db.commit()
