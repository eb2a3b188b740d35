"""
Health check route for the Maharishi backend.

This endpoint is PUBLIC and provides a simple status check for load
balancers, monitoring, and deployment verification. It also reports
whether the AI features are enabled (a Gemini key is configured).
"""

from fastapi import APIRouter

from maharishi.config import settings
from maharishi.schemas.health import HealthResponse
from maharishi.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. Returns a simple status indicator "
        "and whether AI features are enabled."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "ai_enabled": true
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok", ai_enabled=settings.ai_enabled)
