"""
Partial-update merger.

Update requests use the ``UNSET`` sentinel for fields the caller did not
send, so "not supplied" is distinct from ``None`` or ``0``. Rules:

- object fields (strings, dates, user, activity type) are replaced when
  supplied and not None;
- numeric fields (distance, average speed) are replaced only when supplied
  and strictly greater than zero. A submitted ``0`` leaves the stored value
  untouched.

Merging never mutates the existing entity; a new one is returned.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Final

from fitness_tracker.domain.entities import ActivityType, Training, User


class _Unset:
    """Marker type for a field the caller did not send."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()


def is_supplied(value: Any) -> bool:
    """True when the field was sent with a non-null value."""
    return value is not UNSET and value is not None


def replaces_number(value: Any) -> bool:
    """True when a numeric field should overwrite the stored value."""
    return is_supplied(value) and value > 0


@dataclass
class UserPatch:
    """Partial update for a user. Unsent fields stay ``UNSET``."""

    first_name: str | None | _Unset = UNSET
    last_name: str | None | _Unset = UNSET
    birthdate: date | None | _Unset = UNSET
    email: str | None | _Unset = UNSET

    def supplied(self, field_name: str) -> bool:
        return is_supplied(getattr(self, field_name))


@dataclass
class TrainingRequest:
    """
    Create or update payload for a training.

    Times are local date-times as sent by the client; naive values are
    interpreted in the host's local time zone.
    """

    user_id: int | None | _Unset = UNSET
    start_time: datetime | None | _Unset = UNSET
    end_time: datetime | None | _Unset = UNSET
    activity_type: ActivityType | None | _Unset = UNSET
    distance: float | None | _Unset = UNSET
    average_speed: float | None | _Unset = UNSET


USER_FIELDS = ("first_name", "last_name", "birthdate", "email")


def merge_user(existing: User, patch: UserPatch) -> User:
    """Apply supplied patch fields to ``existing`` and return the result."""
    changes = {
        name: getattr(patch, name) for name in USER_FIELDS if patch.supplied(name)
    }
    return replace(existing, **changes)


def merge_training(
    existing: Training,
    request: TrainingRequest,
    user: User | None = None,
    convert_time: Callable[[datetime], datetime] | None = None,
) -> Training:
    """
    Apply supplied request fields to ``existing`` and return the result.

    Args:
        existing: Stored training
        request: Update payload
        user: Resolved owner, replaces the current one when given
        convert_time: Optional callable applied to supplied start/end times

    Returns:
        Merged training
    """
    changes: dict[str, Any] = {}

    if user is not None:
        changes["user"] = user

    for name in ("start_time", "end_time"):
        value = getattr(request, name)
        if is_supplied(value):
            changes[name] = convert_time(value) if convert_time else value

    if is_supplied(request.activity_type):
        changes["activity_type"] = request.activity_type

    for name in ("distance", "average_speed"):
        value = getattr(request, name)
        if replaces_number(value):
            changes[name] = value

    return replace(existing, **changes)
