"""
Main FastAPI application entry point.

This module creates the FastAPI application using the application factory
pattern for clean separation of concerns.
"""

from fitness_tracker import __version__
from fitness_tracker.application import create_app
from fitness_tracker.config import get_settings
from fitness_tracker.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

# Create FastAPI application using factory
app = create_app()


@app.get("/")
async def root() -> dict[str, str | None]:
    """Root endpoint with API information."""
    settings = get_settings()
    return {
        "message": settings.project_name,
        "version": __version__,
        "docs": "/docs" if settings.enable_docs else None,
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "fitness_tracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
    )
