"""User Response Models."""

from datetime import date

from pydantic import Field

from fitness_tracker.api.v1.common.models import CamelModel
from fitness_tracker.domain.entities import User


class UserResponse(CamelModel):
    """
    Full user representation.

    Attributes:
        id: User identity
        first_name: Given name
        last_name: Family name
        birthdate: Date of birth
        email: Contact address
    """

    id: int | None = Field(None, description="User identity")
    first_name: str | None = Field(None, description="Given name")
    last_name: str | None = Field(None, description="Family name")
    birthdate: date | None = Field(None, description="Date of birth")
    email: str | None = Field(None, description="Contact email address")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            birthdate=user.birthdate,
            email=user.email,
        )


class UserSimpleResponse(CamelModel):
    """User identity and names only."""

    id: int | None = Field(None, description="User identity")
    first_name: str | None = Field(None, description="Given name")
    last_name: str | None = Field(None, description="Family name")

    @classmethod
    def from_entity(cls, user: User) -> "UserSimpleResponse":
        return cls(id=user.id, first_name=user.first_name, last_name=user.last_name)


class UserEmailResponse(CamelModel):
    """User identity and email only, returned by searches."""

    id: int | None = Field(None, description="User identity")
    email: str | None = Field(None, description="Contact email address")

    @classmethod
    def from_entity(cls, user: User) -> "UserEmailResponse":
        return cls(id=user.id, email=user.email)
