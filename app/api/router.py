from fastapi import APIRouter
from app.api.v1.auth import router as auth_router
from app.api.v1.workouts import router as workouts_router
from app.api.v1.logs import router as logs_router
from app.api.v1.weekly import router as weekly_router
from app.api.v1.leaderboard import router as leaderboard_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(workouts_router, prefix="/workouts", tags=["workouts"])
api_router.include_router(logs_router, prefix="/logs", tags=["logs"])
api_router.include_router(weekly_router, prefix="/weekly", tags=["weekly"])
api_router.include_router(leaderboard_router, prefix="/leaderboard", tags=["leaderboard"])
