# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Health and liveness for monitoring. The health response also lists the
# operations /calculate accepts, read from the live operation registry.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app import __version__
from app.config import settings
from core.models.calculation import Operation
from core.services.calculation_service import list_operations

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Service status plus the operations POST /calculate accepts."""
    status: str
    timestamp: str
    environment: str
    version: str
    operations: list[str] = Field(
        ...,
        example=["add", "subtract", "multiply", "divide"],
    )


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Reports "healthy" only while every arithmetic operation is registered,
    otherwise "degraded".
    """
    operations = list_operations()
    # Registry is filled at import time by the calculation service module
    complete = set(operations) == {op.value for op in Operation}

    return HealthResponse(
        status="healthy" if complete else "degraded",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
        operations=operations,
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Process liveness for restart decisions."""
    return LivenessResponse(status="alive", timestamp=_now())
