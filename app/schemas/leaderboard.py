from pydantic import BaseModel
from typing import Optional, List
from datetime import date, datetime

class ProfileSummary(BaseModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_name: Optional[str] = None

    class Config:
        from_attributes = True

class RankableLog(BaseModel):
    """Завершённая запись тренировки в том виде, в каком её видит агрегатор."""
    user_id: Optional[int] = None
    score: Optional[float] = 0
    completed_at: Optional[datetime] = None
    profile: Optional[ProfileSummary] = None

    class Config:
        from_attributes = True

class UserRanking(BaseModel):
    id: int
    first_name: str = ""
    last_name: str = ""
    profile_name: str = ""
    display_name: str = ""
    total_workouts: int = 0
    total_score: float = 0
    daily_score: float = 0

class LeaderboardResponse(BaseModel):
    day: date
    rankings: List[UserRanking]
