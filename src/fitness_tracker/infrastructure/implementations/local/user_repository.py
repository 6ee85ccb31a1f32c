"""
Local file-based user repository implementation.

Stores users as JSON files in a local directory structure:
    {base_dir}/
        users/
            {id}.json
"""

import json
import threading
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from loguru import logger

from fitness_tracker.domain.entities import User
from fitness_tracker.domain.exceptions import ConflictError
from fitness_tracker.infrastructure.implementations.local.sequence import (
    FileSequence,
    numeric_ids,
)
from fitness_tracker.infrastructure.repositories.user_repository import UserRepository


class LocalUserRepository(UserRepository):
    """
    File-based user storage for local development.

    Ids come from a persisted sequence and are never reused.
    """

    def __init__(self, base_dir: str = "./.fitness_data"):
        """
        Initialize local user repository.

        Args:
            base_dir: Base directory for entity storage
        """
        self.base_dir = Path(base_dir)
        self.users_dir = self.base_dir / "users"
        self._lock = threading.Lock()

        self.users_dir.mkdir(parents=True, exist_ok=True)
        self._sequence = FileSequence(self.users_dir)

        logger.info(f"Initialized LocalUserRepository at {self.base_dir}")

    def _user_path(self, user_id: int) -> Path:
        """Get path to user file."""
        return self.users_dir / f"{user_id}.json"

    def _user_to_dict(self, user: User) -> dict[str, Any]:
        """Convert User to JSON-serializable dict."""
        return {
            "id": user.id,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "birthdate": user.birthdate.isoformat(),
            "email": user.email,
        }

    def _dict_to_user(self, data: dict[str, Any]) -> User:
        """Convert dict to User."""
        return User(
            id=data["id"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            birthdate=date.fromisoformat(data["birthdate"]),
            email=data["email"],
        )

    def find_by_id(self, user_id: int) -> User | None:
        user_path = self._user_path(user_id)

        if not user_path.exists():
            return None

        return self._dict_to_user(json.loads(user_path.read_text()))

    def find_all(self) -> list[User]:
        return [
            self._dict_to_user(json.loads(self._user_path(user_id).read_text()))
            for user_id in sorted(numeric_ids(self.users_dir))
        ]

    def find_all_by_id(self, ids: Iterable[int]) -> list[User]:
        users = [self.find_by_id(user_id) for user_id in set(ids)]
        return [user for user in users if user is not None]

    def save(self, user: User) -> User:
        with self._lock:
            wanted = user.email.lower()
            for stored in self.find_all():
                if stored.id != user.id and stored.email.lower() == wanted:
                    raise ConflictError(f"User with email {user.email} already exists")

            if user.id is None:
                user = User(
                    first_name=user.first_name,
                    last_name=user.last_name,
                    birthdate=user.birthdate,
                    email=user.email,
                    id=self._sequence.next_id(),
                )
            else:
                self._sequence.advance_to(user.id)

            self._user_path(user.id).write_text(
                json.dumps(self._user_to_dict(user), indent=2)
            )

        logger.info(f"Saved user {user.id}")
        return user

    def delete(self, user: User) -> None:
        user_path = self._user_path(user.id)

        if user_path.exists():
            user_path.unlink()
            logger.info(f"Deleted user {user.id}")

    def find_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        return next(
            (user for user in self.find_all() if user.email.lower() == wanted), None
        )

    def find_all_by_email_containing_ignore_case(self, fragment: str) -> list[User]:
        wanted = fragment.lower()
        return [user for user in self.find_all() if wanted in user.email.lower()]

    def find_by_birthdate_before(self, day: date) -> list[User]:
        return [user for user in self.find_all() if user.birthdate < day]
