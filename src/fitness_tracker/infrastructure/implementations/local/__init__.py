"""Local file-based infrastructure implementations for development."""

from fitness_tracker.infrastructure.implementations.local.training_repository import (
    LocalTrainingRepository,
)
from fitness_tracker.infrastructure.implementations.local.user_repository import (
    LocalUserRepository,
)

__all__ = [
    "LocalTrainingRepository",
    "LocalUserRepository",
]
