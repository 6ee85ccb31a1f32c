"""Training Request Models."""

from datetime import datetime

from pydantic import Field

from fitness_tracker.api.v1.common.models import CamelModel
from fitness_tracker.domain.entities import ActivityType
from fitness_tracker.domain.merge import TrainingRequest

TRAINING_FIELDS = (
    "user_id",
    "start_time",
    "end_time",
    "activity_type",
    "distance",
    "average_speed",
)


class TrainingRequestBody(CamelModel):
    """
    Training payload used by create and update.

    Date-times without an offset are read in the server's local time zone.

    Attributes:
        user_id: Owner of the training
        start_time: Start date-time
        end_time: End date-time
        activity_type: Kind of exercise
        distance: Distance covered
        average_speed: Average speed
    """

    user_id: int | None = Field(None, description="Owner user id")
    start_time: datetime | None = Field(None, description="Start date-time")
    end_time: datetime | None = Field(None, description="End date-time")
    activity_type: ActivityType | None = Field(None, description="Kind of exercise")
    distance: float | None = Field(None, description="Distance covered")
    average_speed: float | None = Field(None, description="Average speed")

    def to_request(self) -> TrainingRequest:
        """Build a domain request holding only the fields sent by the client."""
        return TrainingRequest(
            **{
                name: getattr(self, name)
                for name in TRAINING_FIELDS
                if name in self.model_fields_set
            }
        )
