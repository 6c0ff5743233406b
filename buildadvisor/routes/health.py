"""
Health check route for the PC Build Advisor backend.

This endpoint is PUBLIC and provides a simple status check for platform
probes and deployment verification. It never calls Gemini.
"""

from fastapi import APIRouter

from buildadvisor.schemas.health import HealthResponse
from buildadvisor.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Returns:
        HealthResponse: Simple status object with "ok" status
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
