"""User entity and user search criteria."""

from dataclasses import dataclass
from datetime import date


@dataclass
class User:
    """
    A registered person.

    Attributes:
        first_name: Given name
        last_name: Family name
        birthdate: Calendar date of birth
        email: Contact address, unique across users
        id: Identity assigned by the repository on first save
    """

    first_name: str | None
    last_name: str | None
    birthdate: date | None
    email: str | None
    id: int | None = None


@dataclass(frozen=True)
class UserSearch:
    """
    Sparse search criteria. A field left as None imposes no constraint.
    """

    first_name: str | None = None
    last_name: str | None = None
    birthdate: date | None = None
    email: str | None = None
