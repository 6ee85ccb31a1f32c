"""
Abstract interface for user persistence.

The lifecycle service depends on this port only; filtering strategy
(linear scan, index, SQL) is an implementation detail.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from fitness_tracker.domain.entities import User


class UserRepository(ABC):
    """
    Abstract interface for user storage operations.

    Implementations must:
    - Assign an id on the first save of a user
    - Keep emails unique (case-insensitive) and raise ConflictError otherwise
    """

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """
        Retrieve a user by id.

        Args:
            user_id: User identity

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[User]:
        """List all stored users."""
        pass

    @abstractmethod
    def find_all_by_id(self, ids: Iterable[int]) -> list[User]:
        """
        Retrieve every user whose id is in ``ids``.

        Args:
            ids: User identities

        Returns:
            Matching users (possibly empty)
        """
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Insert or replace a user.

        Args:
            user: User to store; an id of None means insert

        Returns:
            The stored user, with its id assigned

        Raises:
            ConflictError: If another user already owns the email
        """
        pass

    @abstractmethod
    def delete(self, user: User) -> None:
        """Remove a user. Missing users are ignored."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Exact, case-insensitive email lookup."""
        pass

    @abstractmethod
    def find_all_by_email_containing_ignore_case(self, fragment: str) -> list[User]:
        """Users whose email contains ``fragment``, ignoring case."""
        pass

    @abstractmethod
    def find_by_birthdate_before(self, day: date) -> list[User]:
        """Users born strictly before ``day``."""
        pass
