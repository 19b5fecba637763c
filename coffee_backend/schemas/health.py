"""
Health check endpoint schemas.

The health endpoint is PUBLIC and returns a simple status indicator.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /api/health.

    Used by the hosting platform and the booth kiosk to verify the
    server is up.
    """

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
    message: str = Field(
        default="Code & Coffee API is running",
        examples=["Code & Coffee API is running"]
    )
    timestamp: str = Field(
        ...,
        description="Server time in ISO 8601 format",
        examples=["2025-06-01T10:00:00+00:00"]
    )
    version: str = Field(..., examples=["1.0.0"])

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "example": {
                "status": "ok",
                "message": "Code & Coffee API is running",
                "timestamp": "2025-06-01T10:00:00+00:00",
                "version": "1.0.0"
            }
        }
