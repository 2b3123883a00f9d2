"""Health check endpoint."""
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from app.config.api import ApiSettings
from app.core.dependencies import get_database_manager, get_settings
from app.database.connection import DatabaseManager

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    db_manager: DatabaseManager = Depends(get_database_manager),
    settings: ApiSettings = Depends(get_settings),
) -> dict[str, Any]:
    """
    Service and storage connectivity status.

    Always answers 200 while the process is up; the database field tells
    whether the pool can reach storage.
    """
    database_healthy = await run_in_threadpool(db_manager.health_check)
    if not database_healthy:
        logger.warning("Health check: database unreachable")

    return {
        "success": True,
        "service": settings.SERVICE_NAME,
        "version": settings.VERSION,
        "status": "online",
        "database": "connected" if database_healthy else "disconnected",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
    }
