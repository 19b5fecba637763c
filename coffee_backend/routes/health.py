"""
Health check route for the Code & Coffee backend.

This endpoint is PUBLIC and provides a simple status check for the
hosting platform and the booth kiosk. It never touches Gemini or Supabase.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from coffee_backend.config import settings
from coffee_backend.schemas.health import HealthResponse
from coffee_backend.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns a simple status indicator for monitoring.",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "message": "Code & Coffee API is running",
            "timestamp": "2025-06-01T10:00:00+00:00",
            "version": "1.0.0"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.APP_VERSION,
    )
