"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from fitness_tracker import __version__
from fitness_tracker.config import get_settings
from fitness_tracker.core.logging import logger
from fitness_tracker.domain.exceptions import FitnessTrackerError
from fitness_tracker.exception_handlers import (
    domain_exception_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from fitness_tracker.infrastructure import InfrastructureFactory
from fitness_tracker.lifespan import lifespan
from fitness_tracker.middleware import TraceIDMiddleware
from fitness_tracker.openapi import configure_openapi
from fitness_tracker.routes import register_routes


def create_app(infrastructure_factory: InfrastructureFactory | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        infrastructure_factory: Factory providing the repositories. When
            None, one is built from settings.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Configure docs URLs based on settings
    # Must be set BEFORE creating FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )

    # One factory per application, shared by all requests
    app.state.infrastructure_factory = (
        infrastructure_factory or InfrastructureFactory.from_settings(settings)
    )

    # Register exception handlers (RFC 7807 Problem Details)
    app.add_exception_handler(FitnessTrackerError, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Add middleware
    app.add_middleware(TraceIDMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    # Register routes
    register_routes(app)

    # Configure custom OpenAPI schema
    configure_openapi(app)

    logger.info(f" FastAPI application created (v{__version__})")
    logger.info(" Exception handlers registered (RFC 7807 Problem Details)")
    logger.info(f"CORS origins: {settings.get_allowed_origins()}")

    return app
