"""User Request Models."""

from datetime import date

from pydantic import Field

from fitness_tracker.api.v1.common.models import CamelModel
from fitness_tracker.domain.entities import User, UserSearch
from fitness_tracker.domain.merge import USER_FIELDS, UserPatch


class UserRequest(CamelModel):
    """
    Request to create a user.

    Fields are optional at the wire level; the user service reports
    missing or malformed values with its own messages.

    Attributes:
        first_name: Given name
        last_name: Family name
        birthdate: Date of birth (ISO date)
        email: Contact address
    """

    first_name: str | None = Field(None, description="Given name")
    last_name: str | None = Field(None, description="Family name")
    birthdate: date | None = Field(None, description="Date of birth")
    email: str | None = Field(None, description="Contact email address")

    def to_entity(self) -> User:
        """Build a new, not yet persisted user."""
        return User(
            first_name=self.first_name,
            last_name=self.last_name,
            birthdate=self.birthdate,
            email=self.email,
        )


class UserUpdateRequest(UserRequest):
    """
    Partial update of a user.

    Only keys present in the request body are applied.
    """

    def to_patch(self) -> UserPatch:
        """Build a patch holding only the fields sent by the client."""
        return UserPatch(
            **{
                name: getattr(self, name)
                for name in USER_FIELDS
                if name in self.model_fields_set
            }
        )


class UserSearchRequest(CamelModel):
    """Sparse search criteria; omitted fields match every user."""

    first_name: str | None = Field(None, description="Exact given name")
    last_name: str | None = Field(None, description="Exact family name")
    birthdate: date | None = Field(None, description="Exact date of birth")
    email: str | None = Field(None, description="Exact email address")

    def to_search(self) -> UserSearch:
        return UserSearch(
            first_name=self.first_name,
            last_name=self.last_name,
            birthdate=self.birthdate,
            email=self.email,
        )
