"""
Health endpoints.

    GET /health  static service info, never touches the database
    GET /live    process is up
    GET /ready   database answers SELECT 1, else 503 SERVICE_UNAVAILABLE
"""

from fastapi import APIRouter

from src.api.dependencies.database import DbSession
from src.config.settings import settings
from src.shared.core.exceptions import ServiceUnavailableError
from src.shared.db import ping_db
from src.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}


@router.get("/ready")
async def readiness_check(db: DbSession):
    if not await ping_db(db):
        raise ServiceUnavailableError("Database is not reachable")
    return {"status": "ready"}
