"""
Health check route for Hobby to Hustle backend.

This endpoint is PUBLIC (no authentication required) and provides a simple
status check for load balancers, monitoring, and deployment verification.
It also reports whether the AI suggestion endpoints will call Gemini or
serve their default batches.
"""

from fastapi import APIRouter

from backend.config import settings
from backend.schemas.health import HealthResponse
from backend.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint (no authentication required). "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "hobby-to-hustle-backend",
            "ai_configured": true
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok", ai_configured=settings.ai_configured)
