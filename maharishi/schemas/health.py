"""
Health check endpoint schemas.

The health endpoint is PUBLIC and returns a simple status indicator.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health endpoint.

    Used by load balancers, monitoring systems, and deployment checks.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "ai_enabled": True
            }
        }
    )

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
    ai_enabled: bool = Field(
        ...,
        description="Whether a Gemini API key is configured"
    )
