"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from catalog_api.api.schemas import ErrorResponse
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import ping_database

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


async def database_ready() -> bool:
    """Report whether the database accepts queries."""
    try:
        return await ping_database()
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Database readiness check failed", error=str(exc))
        return False


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.api_version,
    )


@router.get("/ready", responses={503: {"model": ErrorResponse}})
async def readiness_check(
    ready: Annotated[bool, Depends(database_ready)],
) -> dict[str, str]:
    """Check if service is ready to accept requests.

    Returns:
        Readiness status.

    Raises:
        HTTPException: If the database is unreachable.
    """
    if not ready:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="database unavailable",
        )
    return {"status": "ready"}
