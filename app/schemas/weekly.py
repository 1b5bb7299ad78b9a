from pydantic import BaseModel
from typing import List
from datetime import date

class WeeklyExerciseStatus(BaseModel):
    id: int
    name: str
    completed: bool
    completed_on: List[date] = []

class WeeklyResponse(BaseModel):
    week_start: date
    week_end: date
    exercises: List[WeeklyExerciseStatus]
