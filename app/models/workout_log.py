from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Float
from sqlalchemy.orm import relationship
from app.core.base import Base

class WorkoutLog(Base):
    __tablename__ = "workout_logs"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    workout_id = Column(Integer, ForeignKey("workouts.id"), nullable=False, index=True)
    notes = Column(String, default="", nullable=False)
    score = Column(Float, default=0, nullable=False)
    total = Column(Float, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    # None пока тренировка в процессе
    completed_at = Column(DateTime, nullable=True, index=True)

    profile = relationship("Profile", back_populates="workout_logs")
    workout = relationship("Workout", back_populates="logs")
    exercise_scores = relationship(
        "ExerciseScore",
        back_populates="workout_log",
        cascade="all, delete-orphan",
        order_by="ExerciseScore.position",
    )

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

class ExerciseScore(Base):
    """Один подход, записанный в рамках WorkoutLog."""
    __tablename__ = "exercise_scores"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    workout_log_id = Column(Integer, ForeignKey("workout_logs.id"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id"), nullable=False)
    position = Column(Integer, default=0, nullable=False)
    weight = Column(Float, nullable=True)
    reps = Column(Integer, nullable=True)
    distance = Column(Float, nullable=True)
    time = Column(Float, nullable=True)
    calories = Column(Float, nullable=True)

    workout_log = relationship("WorkoutLog", back_populates="exercise_scores")
