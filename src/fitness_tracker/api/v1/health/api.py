"""
Health check endpoints.

Provides a health check endpoint for monitoring service status.
"""

from fastapi import APIRouter

from fitness_tracker import __version__
from fitness_tracker.api.v1.health.models import HealthResponse
from fitness_tracker.di import InfrastructureFactoryDep

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(factory: InfrastructureFactoryDep) -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Service status, version and persistence provider
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        storage_provider=factory.provider,
        message="Service is healthy",
    )
