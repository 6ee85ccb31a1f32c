"""
Dependency injection container for the fitness tracker backend.

This module provides centralized dependency injection using FastAPI's Depends
with typing.Annotated for clean type hints throughout the application.
"""

from typing import Annotated

from fastapi import Depends, Request

from fitness_tracker.config import Settings, get_settings
from fitness_tracker.domain.services import (
    TrainingLifecycleService,
    UserLifecycleService,
)
from fitness_tracker.infrastructure import InfrastructureFactory

# ============================================================================
# Settings Dependencies
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""


# ============================================================================
# Infrastructure Dependencies
# ============================================================================


def get_infrastructure_factory(
    request: Request,
    settings: SettingsDep,
) -> InfrastructureFactory:
    """
    Get the application's infrastructure factory.

    The factory is created once in ``create_app`` and kept on
    ``app.state`` so repositories outlive a single request.

    Args:
        request: Current request (injected)
        settings: Application settings (injected)

    Returns:
        Configured infrastructure factory
    """
    factory = getattr(request.app.state, "infrastructure_factory", None)
    if factory is None:
        factory = InfrastructureFactory.from_settings(settings)
        request.app.state.infrastructure_factory = factory
    return factory


InfrastructureFactoryDep = Annotated[
    InfrastructureFactory, Depends(get_infrastructure_factory)
]
"""Injected InfrastructureFactory instance."""


# ============================================================================
# Domain Service Dependencies
# ============================================================================


def get_user_service(factory: InfrastructureFactoryDep) -> UserLifecycleService:
    """
    Get user lifecycle service.

    Args:
        factory: Infrastructure factory (injected)

    Returns:
        User service backed by the factory's user repository
    """
    return UserLifecycleService(factory.get_user_repository())


UserServiceDep = Annotated[UserLifecycleService, Depends(get_user_service)]
"""Injected UserLifecycleService."""


def get_training_service(
    factory: InfrastructureFactoryDep,
    user_service: UserServiceDep,
) -> TrainingLifecycleService:
    """
    Get training lifecycle service.

    Args:
        factory: Infrastructure factory (injected)
        user_service: User read port used to resolve training owners

    Returns:
        Training service backed by the factory's training repository
    """
    return TrainingLifecycleService(factory.get_training_repository(), user_service)


TrainingServiceDep = Annotated[
    TrainingLifecycleService, Depends(get_training_service)
]
"""Injected TrainingLifecycleService."""
