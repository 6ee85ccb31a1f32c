"""In-memory infrastructure implementations for tests and development."""

from fitness_tracker.infrastructure.implementations.memory.training_repository import (
    InMemoryTrainingRepository,
)
from fitness_tracker.infrastructure.implementations.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryTrainingRepository",
    "InMemoryUserRepository",
]
