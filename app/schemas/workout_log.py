from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime

from app.schemas.workout import WorkoutBrief
from app.services.score_calculator import lenient_number


class SetEntry(BaseModel):
    """Один подход: значимые поля зависят от категории упражнения."""
    weight: Optional[float] = None
    reps: Optional[int] = None
    distance: Optional[float] = None  # метры
    time: Optional[float] = None  # минуты
    calories: Optional[float] = None

    class Config:
        from_attributes = True

    @field_validator("weight", "distance", "time", "calories", mode="before")
    @classmethod
    def coerce_number(cls, value):
        return lenient_number(value)

    @field_validator("reps", mode="before")
    @classmethod
    def coerce_reps(cls, value):
        number = lenient_number(value)
        return int(number) if number is not None else None


class ExerciseLogInput(BaseModel):
    exercise_id: int
    sets: List[SetEntry] = []


class WorkoutLogSubmit(BaseModel):
    exercises: List[ExerciseLogInput] = []
    notes: str = ""


class StartWorkoutRequest(BaseModel):
    workout_id: int


class WorkoutLogRead(BaseModel):
    id: int
    user_id: int
    workout_id: int
    notes: str = ""
    score: float = 0
    total: float = 0
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    workout: Optional[WorkoutBrief] = None

    class Config:
        from_attributes = True


class ExerciseLogState(BaseModel):
    exercise_id: int
    exercise_name: Optional[str] = None
    category: str
    sets: List[SetEntry]


class ResumeResponse(BaseModel):
    log: WorkoutLogRead
    exercises: List[ExerciseLogState]


class CompletedExercise(BaseModel):
    exercise_id: int
    completed_at: datetime


class WorkoutCompleteResponse(BaseModel):
    log: WorkoutLogRead
    completed_exercises: List[CompletedExercise]
