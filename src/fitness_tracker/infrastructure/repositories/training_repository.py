"""Abstract interface for training persistence."""

from abc import ABC, abstractmethod
from datetime import datetime

from fitness_tracker.domain.entities import ActivityType, Training


class TrainingRepository(ABC):
    """
    Abstract interface for training storage operations.

    Returned trainings carry the current state of their owning user.
    """

    @abstractmethod
    def find_by_id(self, training_id: int) -> Training | None:
        """
        Retrieve a training by id.

        Args:
            training_id: Training identity

        Returns:
            Training if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Training]:
        """List all stored trainings."""
        pass

    @abstractmethod
    def save(self, training: Training) -> Training:
        """
        Insert or replace a training.

        Args:
            training: Training to store; an id of None means insert

        Returns:
            The stored training, with its id assigned
        """
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> list[Training]:
        """Trainings owned by the given user."""
        pass

    @abstractmethod
    def find_by_end_time_after(self, instant: datetime) -> list[Training]:
        """Trainings whose end time is strictly after ``instant``."""
        pass

    @abstractmethod
    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        """Trainings of the given activity type."""
        pass
