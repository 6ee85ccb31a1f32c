"""Abstract repository interfaces for persistence operations."""

from fitness_tracker.infrastructure.repositories.training_repository import (
    TrainingRepository,
)
from fitness_tracker.infrastructure.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "TrainingRepository",
    "UserRepository",
]
