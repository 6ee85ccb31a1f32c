"""
Service contracts exposed to the transport layer and to other services.

User operations are split into a read port (``UserProvider``) and a write
port (``UserService``) so that the training service can depend on user
lookups alone.
"""

from abc import ABC, abstractmethod
from datetime import date

from fitness_tracker.domain.entities import ActivityType, Training, User, UserSearch
from fitness_tracker.domain.merge import TrainingRequest, UserPatch


class UserProvider(ABC):
    """Read-only user operations."""

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Retrieve a user by id without argument validation."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Retrieve a user by email without argument validation."""
        pass

    @abstractmethod
    def find_all_users(self) -> list[User]:
        """List all users."""
        pass

    @abstractmethod
    def get_user_details_by_id(self, user_id: int | None) -> User | None:
        """
        Retrieve a user by id.

        Raises:
            InvalidArgumentError: If the id is None or lower than 1
        """
        pass

    @abstractmethod
    def get_user_details_by_email(self, email: str | None) -> User | None:
        """
        Retrieve a user by email (case-insensitive).

        Raises:
            InvalidArgumentError: If the email is None or blank
        """
        pass

    @abstractmethod
    def find_matching_users(self, search: UserSearch) -> list[User]:
        """Users matching every populated search criterion."""
        pass

    @abstractmethod
    def find_matching_users_by_partial_email(
        self, partial_email: str | None
    ) -> list[User]:
        """Users whose email contains the fragment, ignoring case."""
        pass

    @abstractmethod
    def find_users_older_than(self, day: date | None) -> list[User]:
        """Users born strictly before ``day``."""
        pass


class UserService(ABC):
    """Modifying user operations."""

    @abstractmethod
    def create_user(self, user: User | None) -> User:
        """Validate and store a new user."""
        pass

    @abstractmethod
    def update_user(self, user_id: int, patch: UserPatch) -> User:
        """Apply a partial update to an existing user."""
        pass

    @abstractmethod
    def delete_user_by_id(self, user_id: int) -> User:
        """Remove a user and return it."""
        pass


class TrainingProvider(ABC):
    """Training operations."""

    @abstractmethod
    def get_training(self, training_id: int) -> Training | None:
        """
        Retrieve a training by id.

        Returns:
            Training if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all_trainings(self) -> list[Training]:
        pass

    @abstractmethod
    def find_trainings_by_user_id(self, user_id: int) -> list[Training]:
        pass

    @abstractmethod
    def find_finished_trainings_after(self, day: date) -> list[Training]:
        pass

    @abstractmethod
    def find_trainings_by_activity_type(
        self, activity_type: ActivityType
    ) -> list[Training]:
        pass

    @abstractmethod
    def create_training(self, request: TrainingRequest) -> Training:
        pass

    @abstractmethod
    def update_training(self, training_id: int, request: TrainingRequest) -> Training:
        pass
