from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional, Set, Tuple

from app.core.config import settings
from app.models.profile import Profile
from app.models.workout import Exercise
from app.models.workout_log import WorkoutLog
from app.repositories.workout_log_repository import WorkoutLogRepository
from app.repositories.workout_repository import WorkoutRepository
from app.schemas.weekly import WeeklyExerciseStatus, WeeklyResponse
from app.schemas.workout_log import CompletedExercise


def week_start_for(day: date, week_starts_on: Optional[int] = None) -> date:
    if week_starts_on is None:
        week_starts_on = settings.WEEK_STARTS_ON
    offset = (day.weekday() - week_starts_on) % 7
    return day - timedelta(days=offset)


def week_bounds(day: date, week_starts_on: Optional[int] = None) -> Tuple[datetime, datetime]:
    """Окно недели, содержащей day: от начала первого дня до конца седьмого включительно."""
    start_day = week_start_for(day, week_starts_on)
    end_day = start_day + timedelta(days=6)
    return datetime.combine(start_day, time.min), datetime.combine(end_day, time.max)


def flatten_completed_exercises(logs: Iterable[WorkoutLog]) -> List[CompletedExercise]:
    """Каждое упражнение завершённой тренировки с датой завершения."""
    completed = []
    for log in logs:
        if log.completed_at is None or log.workout is None:
            continue
        for workout_exercise in log.workout.workout_exercises:
            completed.append(CompletedExercise(
                exercise_id=workout_exercise.exercise_id,
                completed_at=log.completed_at
            ))
    return completed


def build_weekly_status(
        exercises: Iterable[Exercise],
        completed: Iterable[CompletedExercise]
) -> List[WeeklyExerciseStatus]:
    dates_by_exercise: Dict[int, Set[date]] = defaultdict(set)
    for item in completed:
        dates_by_exercise[item.exercise_id].add(item.completed_at.date())

    statuses = []
    for exercise in exercises:
        dates = sorted(dates_by_exercise.get(exercise.id, set()))
        statuses.append(WeeklyExerciseStatus(
            id=exercise.id,
            name=exercise.name,
            completed=bool(dates),
            completed_on=dates
        ))
    return statuses


class WeeklyService:
    def __init__(self, logs: WorkoutLogRepository, workouts: WorkoutRepository):
        self.logs = logs
        self.workouts = workouts

    async def completed_exercises(self, user: Profile, day: date) -> List[CompletedExercise]:
        start, end = week_bounds(day)
        logs = await self.logs.get_completed_between(start, end, user_id=user.id)
        return flatten_completed_exercises(logs)

    async def get_weekly_status(self, user: Profile, day: date) -> WeeklyResponse:
        start, end = week_bounds(day)
        exercises = await self.workouts.list_exercises()
        completed = await self.completed_exercises(user, day)

        return WeeklyResponse(
            week_start=start.date(),
            week_end=end.date(),
            exercises=build_weekly_status(exercises, completed)
        )
