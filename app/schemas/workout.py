from pydantic import BaseModel
from typing import Optional, List
from datetime import date

class ExerciseRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class WorkoutExerciseRead(BaseModel):
    id: int
    exercise_id: int
    position: int = 0
    sets: int = 1
    reps: Optional[int] = None
    weight: Optional[float] = None
    distance: Optional[float] = None
    time: Optional[float] = None
    calories: Optional[float] = None
    exercise: Optional[ExerciseRead] = None

    class Config:
        from_attributes = True

class WorkoutBrief(BaseModel):
    id: int
    name: str
    type: Optional[str] = None
    scheduled_date: Optional[date] = None

    class Config:
        from_attributes = True

class WorkoutRead(WorkoutBrief):
    description: Optional[str] = None
    is_wod: bool = False
    workout_exercises: List[WorkoutExerciseRead] = []

class WodResponse(BaseModel):
    day: date
    workout: Optional[WorkoutRead] = None
