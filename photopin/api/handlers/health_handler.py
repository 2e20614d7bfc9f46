"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter
from sqlalchemy import text

from photopin.config.settings import settings
from photopin.shared.schemas.common import HealthResponse
from photopin.api.dependencies.database import DbSession


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """
    Readiness check: the database answers a trivial query.

    A failing connection surfaces as a 500 through the global handler.
    """
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """Liveness check: the process is serving requests."""
    return {"status": "alive"}
