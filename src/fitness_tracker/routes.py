"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from fitness_tracker.api.v1.health.router import router as health_router
from fitness_tracker.api.v1.trainings.router import router as trainings_router
from fitness_tracker.api.v1.users.router import router as users_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, public)
    app.include_router(health_router)

    # User endpoints (versioned API)
    app.include_router(users_router)

    # Training endpoints (versioned API)
    app.include_router(trainings_router)
