"""
Training lifecycle service.

Resolves training owners through the user read port and applies the
partial-update rules of ``fitness_tracker.domain.merge``.
"""

from datetime import UTC, date, datetime, time

from fitness_tracker.core.logging import logger
from fitness_tracker.domain.entities import ActivityType, Training, User
from fitness_tracker.domain.exceptions import (
    TrainingNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from fitness_tracker.domain.merge import (
    TrainingRequest,
    is_supplied,
    merge_training,
)
from fitness_tracker.domain.services.ports import TrainingProvider, UserProvider
from fitness_tracker.infrastructure.repositories import TrainingRepository


def to_instant(value: datetime) -> datetime:
    """
    Convert a client date-time to a UTC instant.

    Naive values are read as local time of the host.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    return value.astimezone(UTC)


def start_of_day(day: date) -> datetime:
    """Local midnight at the start of ``day``, as a UTC instant."""
    return to_instant(datetime.combine(day, time.min))


class TrainingLifecycleService(TrainingProvider):
    """
    Service for creating, reading and updating trainings.

    Depends on the user read port only, never on user writes.
    """

    def __init__(
        self,
        training_repository: TrainingRepository,
        user_provider: UserProvider,
    ):
        """
        Initialize training service.

        Args:
            training_repository: Persistence port for trainings
            user_provider: Read port used to resolve training owners
        """
        self.training_repository = training_repository
        self.user_provider = user_provider

    def get_training(self, training_id: int) -> Training | None:
        return self.training_repository.find_by_id(training_id)

    def find_all_trainings(self) -> list[Training]:
        logger.info("Getting all trainings.")
        return self.training_repository.find_all()

    def find_trainings_by_user_id(self, user_id: int) -> list[Training]:
        logger.info(f"Getting all trainings for the user with the id: {user_id}")
        return self.training_repository.find_by_user_id(user_id)

    def find_finished_trainings_after(self, day: date) -> list[Training]:
        logger.info(f"Getting all trainings finished after: {day.isoformat()}")
        return self.training_repository.find_by_end_time_after(start_of_day(day))

    def find_trainings_by_activity_type(
        self, activity_type: ActivityType
    ) -> list[Training]:
        return self.training_repository.find_by_activity_type(activity_type)

    def create_training(self, request: TrainingRequest) -> Training:
        """
        Create a training for an existing user.

        Args:
            request: Training payload; user id, times and activity type are required

        Returns:
            The stored training

        Raises:
            InvalidArgumentError: If the user id is missing or lower than 1
            UserNotFoundError: If the user does not exist (nothing is saved)
            ValidationError: If a required field is missing or a number is negative
        """
        user = self._resolve_user(request.user_id)

        if not is_supplied(request.start_time):
            raise ValidationError("Start time is required.")
        if not is_supplied(request.end_time):
            raise ValidationError("End time is required.")
        if not is_supplied(request.activity_type):
            raise ValidationError("Activity type is required.")

        distance = request.distance if is_supplied(request.distance) else 0.0
        average_speed = (
            request.average_speed if is_supplied(request.average_speed) else 0.0
        )
        if distance < 0:
            logger.warning(f"Negative distance: {distance}")
            raise ValidationError("Distance must not be negative.")
        if average_speed < 0:
            logger.warning(f"Negative average speed: {average_speed}")
            raise ValidationError("Average speed must not be negative.")

        training = Training(
            user=user,
            start_time=to_instant(request.start_time),
            end_time=to_instant(request.end_time),
            activity_type=ActivityType(request.activity_type),
            distance=distance,
            average_speed=average_speed,
        )

        logger.info(
            f"Creating {training.activity_type.value} training for user {user.id}"
        )
        return self.training_repository.save(training)

    def update_training(self, training_id: int, request: TrainingRequest) -> Training:
        """
        Apply the supplied request fields to an existing training.

        The owner is always re-resolved from ``request.user_id``.

        Raises:
            TrainingNotFoundError: If no training exists for ``training_id``
            InvalidArgumentError: If the user id is missing or lower than 1
            UserNotFoundError: If the user does not exist
        """
        existing = self.get_training(training_id)
        if existing is None:
            raise TrainingNotFoundError(training_id)

        user = self._resolve_user(request.user_id)

        logger.info(f"Updating training {training_id}")
        merged = merge_training(existing, request, user=user, convert_time=to_instant)
        return self.training_repository.save(merged)

    def _resolve_user(self, user_id: int | None) -> User:
        if not is_supplied(user_id):
            user_id = None
        user = self.user_provider.get_user_details_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
