from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://wodboard_user:wodboard_password@db:5432/wodboard_db"
    SECRET_KEY: str = "SECRET_KEY_FOR_WODBOARD"
    # При продакшн/обычной разработке лучше не пересоздавать БД на каждом старте
    RESET_DATABASE: bool = False
    SQL_ECHO: bool = False
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]
    # Лидерборд показывает топ-N пользователей за день
    LEADERBOARD_LIMIT: int = 10
    # 0 = понедельник, как в datetime.weekday()
    WEEK_STARTS_ON: int = 0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
