"""Domain entities."""

from fitness_tracker.domain.entities.training import ActivityType, Training
from fitness_tracker.domain.entities.user import User, UserSearch

__all__ = [
    "ActivityType",
    "Training",
    "User",
    "UserSearch",
]
