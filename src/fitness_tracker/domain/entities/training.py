"""Training entity and activity types."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from fitness_tracker.domain.entities.user import User


class ActivityType(str, Enum):
    """Kinds of exercise a training can record."""

    RUNNING = "RUNNING"
    CYCLING = "CYCLING"
    WALKING = "WALKING"
    SWIMMING = "SWIMMING"
    TENNIS = "TENNIS"


@dataclass
class Training:
    """
    A single recorded workout.

    Attributes:
        user: Owner of the training (must be a persisted user)
        start_time: Start instant (timezone-aware, UTC)
        end_time: End instant (timezone-aware, UTC)
        activity_type: Kind of exercise
        distance: Distance covered, non-negative
        average_speed: Average speed, non-negative
        id: Identity assigned by the repository on first save
    """

    user: User
    start_time: datetime
    end_time: datetime
    activity_type: ActivityType
    distance: float = 0.0
    average_speed: float = 0.0
    id: int | None = None
