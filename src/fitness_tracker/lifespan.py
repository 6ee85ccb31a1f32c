"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown events for the application.

    Args:
        app: FastAPI application instance
    """
    # Startup
    logger.info(" Starting fitness tracker backend...")
    logger.info(f"Application version: {app.version}")

    factory = getattr(app.state, "infrastructure_factory", None)
    if factory is not None:
        logger.info(f"Storage provider: {factory.provider}")

    yield

    # Shutdown
    logger.info(" Shutting down fitness tracker backend...")
