"""Health check endpoints for monitoring application status."""

import time

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text

from taskhub.api.dependencies import get_settings
from taskhub.core.config import Settings
from taskhub.db.session import get_db

router = APIRouter(tags=["health"])


async def _database_ok(db: AsyncSession) -> bool:
    result = await db.execute(text("SELECT 1"))
    return result.scalar_one() == 1


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Get system health status",
    response_description="Health status of all system components"
)
async def health_check(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Check health of all system components."""
    health_status = {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
        "timestamp": time.time(),
        "components": {}
    }

    start_time = time.perf_counter()
    try:
        healthy = await _database_ok(db)
        latency = round((time.perf_counter() - start_time) * 1000, 2)
        health_status["components"]["database"] = {
            "status": "healthy" if healthy else "unhealthy",
            "latency_ms": latency
        }
        if not healthy:
            health_status["status"] = "degraded"
    except Exception as e:
        health_status["status"] = "degraded"
        health_status["components"]["database"] = {
            "status": "unhealthy",
            "error": str(e)
        }

    return health_status


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness probe",
    response_description="Application readiness status"
)
async def readiness_probe(db: AsyncSession = Depends(get_db)):
    """Check if application is ready to handle requests."""
    components_status = {"api": True, "database": False}

    try:
        components_status["database"] = await _database_ok(db)
    except Exception:
        components_status["database"] = False

    return {
        "ready": all(components_status.values()),
        "components": components_status
    }


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    response_description="Application liveness status"
)
async def liveness_probe():
    """Simple check that application is running."""
    return {"alive": True}
