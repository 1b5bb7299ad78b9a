import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core import init_database, settings
from app.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="WOD Board - workout of the day, logging and leaderboard")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    await init_database()
    logger.info("Приложение запущено!")


@app.get("/")
async def root():
    base_url = "http://localhost:8000"

    return {
        "app": "WOD Board",
        "links": {
            "wod": f"{base_url}/api/v1/workouts/wod",
            "incomplete": f"{base_url}/api/v1/logs/incomplete",
            "weekly": f"{base_url}/api/v1/weekly",
            "leaderboard": f"{base_url}/api/v1/leaderboard",
            "docs": f"{base_url}/docs",
        }
    }
