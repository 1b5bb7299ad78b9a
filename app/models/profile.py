from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.core.base import Base

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    workout_logs = relationship("WorkoutLog", back_populates="profile", cascade="all, delete")
