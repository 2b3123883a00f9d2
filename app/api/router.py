"""API router for all endpoints."""

from fastapi import APIRouter

from .auth import router as auth_router
from .health import router as health_router
from .messages import router as messages_router
from .stats import router as stats_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(stats_router)
api_router.include_router(messages_router)
