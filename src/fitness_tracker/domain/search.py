"""
User search matcher.

``validate_search`` must pass before ``matches`` is used; invalid criteria
fail the whole search before any repository access.
"""

from collections.abc import Iterable

from fitness_tracker.domain.entities import User, UserSearch
from fitness_tracker.domain.exceptions import ValidationError
from fitness_tracker.domain.validators import (
    is_not_future,
    is_valid_email,
    is_valid_name,
)

INVALID_FIRST_NAME = "Invalid first name."
INVALID_LAST_NAME = "Invalid last name"
INVALID_EMAIL = "Invalid email."
INVALID_BIRTHDATE = "Invalid Birthdate."


def validate_search(search: UserSearch) -> None:
    """
    Validate every populated criterion.

    Raises:
        ValidationError: On the first populated field that breaks its rule
    """
    if search.first_name is not None and not is_valid_name(search.first_name):
        raise ValidationError(INVALID_FIRST_NAME)
    if search.last_name is not None and not is_valid_name(search.last_name):
        raise ValidationError(INVALID_LAST_NAME)
    if search.email is not None and not is_valid_email(search.email):
        raise ValidationError(INVALID_EMAIL)
    if search.birthdate is not None and not is_not_future(search.birthdate):
        raise ValidationError(INVALID_BIRTHDATE)


def matches(user: User, search: UserSearch) -> bool:
    """Return True when every populated criterion equals the user's field."""
    if search.first_name is not None and user.first_name != search.first_name:
        return False
    if search.last_name is not None and user.last_name != search.last_name:
        return False
    if search.birthdate is not None and user.birthdate != search.birthdate:
        return False
    if search.email is not None and user.email != search.email:
        return False
    return True


def filter_matching(users: Iterable[User], search: UserSearch) -> list[User]:
    """Keep the users matching ``search``, preserving order."""
    return [user for user in users if matches(user, search)]
