"""Training Response Models."""

from datetime import datetime

from pydantic import Field

from fitness_tracker.api.v1.common.models import CamelModel
from fitness_tracker.api.v1.users.response import UserResponse
from fitness_tracker.domain.entities import ActivityType, Training


class TrainingResponse(CamelModel):
    """
    Training representation with its owner embedded.

    Times are UTC instants.
    """

    id: int | None = Field(None, description="Training identity")
    user: UserResponse = Field(..., description="Owner of the training")
    start_time: datetime = Field(..., description="Start instant (UTC)")
    end_time: datetime = Field(..., description="End instant (UTC)")
    activity_type: ActivityType = Field(..., description="Kind of exercise")
    distance: float = Field(..., description="Distance covered")
    average_speed: float = Field(..., description="Average speed")

    @classmethod
    def from_entity(cls, training: Training) -> "TrainingResponse":
        return cls(
            id=training.id,
            user=UserResponse.from_entity(training.user),
            start_time=training.start_time,
            end_time=training.end_time,
            activity_type=training.activity_type,
            distance=training.distance,
            average_speed=training.average_speed,
        )
