"""
In-memory user repository implementation.

Keeps users in a dict keyed by id. Data lives as long as the process.
Entities are copied on the way in and out so callers never share state
with the store.
"""

import threading
from collections.abc import Iterable
from dataclasses import replace
from datetime import date

from loguru import logger

from fitness_tracker.domain.entities import User
from fitness_tracker.domain.exceptions import ConflictError
from fitness_tracker.infrastructure.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed user storage.

    Thread-safe via a single lock around the dict and id sequence.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

        logger.info("Initialized InMemoryUserRepository")

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user is not None else None

    def find_all(self) -> list[User]:
        with self._lock:
            return [replace(user) for user in self._users.values()]

    def find_all_by_id(self, ids: Iterable[int]) -> list[User]:
        wanted = set(ids)
        return [user for user in self.find_all() if user.id in wanted]

    def save(self, user: User) -> User:
        with self._lock:
            self._check_unique_email(user)
            if user.id is None:
                user = replace(user, id=self._next_id)
                self._next_id += 1
            else:
                self._next_id = max(self._next_id, user.id + 1)
            self._users[user.id] = replace(user)

        logger.debug(f"Saved user {user.id}")
        return replace(user)

    def delete(self, user: User) -> None:
        with self._lock:
            self._users.pop(user.id, None)

    def find_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        for user in self.find_all():
            if user.email.lower() == wanted:
                return user
        return None

    def find_all_by_email_containing_ignore_case(self, fragment: str) -> list[User]:
        wanted = fragment.lower()
        return [user for user in self.find_all() if wanted in user.email.lower()]

    def find_by_birthdate_before(self, day: date) -> list[User]:
        return [user for user in self.find_all() if user.birthdate < day]

    def _check_unique_email(self, user: User) -> None:
        wanted = user.email.lower()
        for stored in self._users.values():
            if stored.id != user.id and stored.email.lower() == wanted:
                raise ConflictError(f"User with email {user.email} already exists")
