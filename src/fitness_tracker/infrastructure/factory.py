"""
Infrastructure factory for provider selection.

Selects appropriate repository implementations based on configuration:
- memory: Process-local dicts (default, tests, demos)
- local: JSON files on disk for development

Usage:
    from fitness_tracker.infrastructure import InfrastructureFactory
    from fitness_tracker.config import get_settings

    # Option 1: From settings
    factory = InfrastructureFactory.from_settings(get_settings())

    # Option 2: Manual configuration
    factory = InfrastructureFactory(provider="local", base_dir="/tmp/fitness")

    # Get repositories
    user_repo = factory.get_user_repository()
    training_repo = factory.get_training_repository()
"""

from typing import TYPE_CHECKING, Literal

from loguru import logger

from fitness_tracker.infrastructure.repositories import (
    TrainingRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from fitness_tracker.config import Settings

InfrastructureProvider = Literal["memory", "local"]

SUPPORTED_PROVIDERS = ("memory", "local")


class InfrastructureFactory:
    """
    Factory for creating repository instances.

    Repositories are created on first request and reused afterwards, so
    every service built from one factory shares the same store.
    """

    def __init__(self, provider: InfrastructureProvider | None = None, **config):
        """
        Initialize infrastructure factory.

        Args:
            provider: Infrastructure provider ("memory", "local").
                     If None, uses "memory" as default.
            **config: Provider-specific configuration options (base_dir)

        Raises:
            ValueError: If provider is not supported
        """
        if provider is None:
            provider = "memory"

        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported provider: {provider}")

        self.provider = provider
        self.config = config
        self._user_repository: UserRepository | None = None
        self._training_repository: TrainingRepository | None = None

        logger.info(f"Initialized InfrastructureFactory with provider: {provider}")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "InfrastructureFactory":
        """
        Create factory from Settings object.

        Args:
            settings: Application settings from config.py

        Returns:
            InfrastructureFactory configured from settings
        """
        config = {
            "base_dir": settings.storage_base_dir,
        }

        return cls(provider=settings.storage_provider, **config)

    def get_user_repository(self) -> UserRepository:
        """
        Get user repository for configured provider.

        Returns:
            UserRepository implementation
        """
        if self._user_repository is not None:
            return self._user_repository

        if self.provider == "local":
            from fitness_tracker.infrastructure.implementations.local import (
                LocalUserRepository,
            )

            self._user_repository = LocalUserRepository(
                base_dir=self.config.get("base_dir", "./.fitness_data")
            )

        else:
            from fitness_tracker.infrastructure.implementations.memory import (
                InMemoryUserRepository,
            )

            self._user_repository = InMemoryUserRepository()

        return self._user_repository

    def get_training_repository(self) -> TrainingRepository:
        """
        Get training repository for configured provider.

        Returns:
            TrainingRepository implementation sharing this factory's
            user repository
        """
        if self._training_repository is not None:
            return self._training_repository

        user_repository = self.get_user_repository()

        if self.provider == "local":
            from fitness_tracker.infrastructure.implementations.local import (
                LocalTrainingRepository,
            )

            self._training_repository = LocalTrainingRepository(
                user_repository,
                base_dir=self.config.get("base_dir", "./.fitness_data"),
            )

        else:
            from fitness_tracker.infrastructure.implementations.memory import (
                InMemoryTrainingRepository,
            )

            self._training_repository = InMemoryTrainingRepository(user_repository)

        return self._training_repository
