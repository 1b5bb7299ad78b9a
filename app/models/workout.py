from datetime import datetime

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Boolean, Float
from sqlalchemy.orm import relationship
from app.core.base import Base

class Workout(Base):
    __tablename__ = "workouts"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    # Тип тренировки, например "weight training"
    type = Column(String, nullable=True)
    is_wod = Column(Boolean, default=False, nullable=False)
    scheduled_date = Column(Date, nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    workout_exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.position",
    )
    logs = relationship("WorkoutLog", back_populates="workout", cascade="all, delete-orphan")

class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)

class WorkoutExercise(Base):
    """Упражнение в составе тренировки с рекомендуемыми значениями на подход."""
    __tablename__ = "workout_exercises"

    id = Column(Integer, primary_key=True)
    workout_id = Column(Integer, ForeignKey("workouts.id"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id"), nullable=False, index=True)
    position = Column(Integer, default=0, nullable=False)
    sets = Column(Integer, default=1, nullable=False)
    reps = Column(Integer, nullable=True)
    weight = Column(Float, nullable=True)
    distance = Column(Float, nullable=True)  # метры
    time = Column(Float, nullable=True)  # минуты
    calories = Column(Float, nullable=True)

    workout = relationship("Workout", back_populates="workout_exercises")
    exercise = relationship("Exercise")
