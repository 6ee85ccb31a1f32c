"""
User lifecycle service.

Sequences validation, search matching and partial-update merging around
the user repository:
- Creation: full field validation, then insert
- Lookups: argument validation, then repository queries
- Update: existence check, patch validation, merge, save
- Deletion: id lookup with a uniqueness check, then delete
"""

from datetime import date

from fitness_tracker.core.logging import logger
from fitness_tracker.domain.entities import User, UserSearch
from fitness_tracker.domain.exceptions import (
    ConflictError,
    InvalidArgumentError,
    UserNotFoundError,
    ValidationError,
)
from fitness_tracker.domain.merge import UserPatch, merge_user
from fitness_tracker.domain.search import (
    INVALID_BIRTHDATE,
    INVALID_EMAIL,
    INVALID_FIRST_NAME,
    INVALID_LAST_NAME,
    filter_matching,
    validate_search,
)
from fitness_tracker.domain.services.ports import UserProvider, UserService
from fitness_tracker.domain.validators import (
    is_blank,
    is_not_future,
    is_valid_email,
    is_valid_email_fragment,
    is_valid_name,
)
from fitness_tracker.infrastructure.repositories import UserRepository


class UserLifecycleService(UserProvider, UserService):
    """
    Service for creating, reading, updating, deleting and searching users.

    The service keeps no state between calls; all state lives in the
    repository.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize user service.

        Args:
            user_repository: Persistence port for users
        """
        self.user_repository = user_repository

    # ==========================================================================
    # Writes
    # ==========================================================================

    def create_user(self, user: User | None) -> User:
        """
        Create a new user after validating its fields.

        Args:
            user: User to create, without an id

        Returns:
            The stored user with its id assigned

        Raises:
            ValidationError: If a field breaks its rule
            InvalidArgumentError: If the user already has an id
        """
        try:
            self._validate_new_user(user)
        except ValidationError as e:
            logger.warning(f"Rejected new user: {e.message}")
            raise

        logger.info(f"Creating user {user}")
        if user.id is not None:
            raise InvalidArgumentError(
                "User has already DB ID, update is not permitted!"
            )
        return self.user_repository.save(user)

    def update_user(self, user_id: int, patch: UserPatch) -> User:
        """
        Apply the supplied patch fields to an existing user.

        Args:
            user_id: Identity of the user to update
            patch: Fields to change; unsent or None fields are kept

        Returns:
            The merged and stored user

        Raises:
            UserNotFoundError: If no user exists for ``user_id``
            ValidationError: If a supplied field breaks its rule
        """
        existing = self.user_repository.find_by_id(user_id)
        if existing is None:
            raise UserNotFoundError(user_id)

        try:
            self._validate_patch(patch)
        except ValidationError as e:
            logger.warning(f"Rejected update of user {user_id}: {e.message}")
            raise

        logger.info(f"Updating user {user_id}")
        return self.user_repository.save(merge_user(existing, patch))

    def delete_user_by_id(self, user_id: int) -> User:
        """
        Delete the single user owning ``user_id``.

        Raises:
            UserNotFoundError: If no user has this id
            ConflictError: If more than one stored user has this id
        """
        users = self.user_repository.find_all_by_id([user_id])
        if not users:
            raise UserNotFoundError(user_id)
        if len(users) > 1:
            logger.error(f"Found {len(users)} users sharing id {user_id}")
            raise ConflictError(f"There is more than one user with id: {user_id}")

        self.user_repository.delete(users[0])
        logger.info(f"Deleted user {user_id}")
        return users[0]

    # ==========================================================================
    # Reads
    # ==========================================================================

    def get_user(self, user_id: int) -> User | None:
        return self.user_repository.find_by_id(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        return self.user_repository.find_by_email(email)

    def find_all_users(self) -> list[User]:
        return self.user_repository.find_all()

    def get_user_details_by_id(self, user_id: int | None) -> User | None:
        """
        Retrieve a user by id, validating the id first.

        An unknown id is not an error: None is returned.
        """
        if user_id is None or user_id < 1:
            logger.warning(f"Invalid user id: {user_id}")
            raise InvalidArgumentError("Invalid id")

        logger.info(f"Getting details for user's id: {user_id}")
        return self.user_repository.find_by_id(user_id)

    def get_user_details_by_email(self, email: str | None) -> User | None:
        if is_blank(email):
            logger.warning("Invalid email")
            raise InvalidArgumentError("Invalid email")

        logger.info(f"Getting details for user's email: {email}")
        return self.user_repository.find_by_email(email)

    def find_matching_users(self, search: UserSearch) -> list[User]:
        """
        Find users matching every populated criterion of ``search``.

        Raises:
            ValidationError: If the criteria are invalid; the repository
                is not queried in that case
        """
        try:
            validate_search(search)
        except ValidationError as e:
            logger.warning(f"Rejected user search: {e.message}")
            raise

        logger.info(f"Getting matching users by search: {search}")
        return filter_matching(self.user_repository.find_all(), search)

    def find_matching_users_by_partial_email(
        self, partial_email: str | None
    ) -> list[User]:
        if is_blank(partial_email):
            logger.warning("Missing email fragment")
            raise ValidationError("Email fragment is required.")
        if not is_valid_email_fragment(partial_email):
            logger.warning(f"Invalid email fragment: {partial_email}")
            raise ValidationError("Email fragment contains invalid characters.")

        logger.info(f"Getting matching users by email fragment: {partial_email}")
        return self.user_repository.find_all_by_email_containing_ignore_case(
            partial_email
        )

    def find_users_older_than(self, day: date | None) -> list[User]:
        if day is None:
            logger.warning("Missing date for older-than search")
            raise InvalidArgumentError("The date is required.")

        logger.info(f"Getting users older than: {day}")
        return self.user_repository.find_by_birthdate_before(day)

    # ==========================================================================
    # Validation helpers
    # ==========================================================================

    @staticmethod
    def _validate_new_user(user: User | None) -> None:
        if user is None:
            raise ValidationError("User cannot be null.")

        if is_blank(user.first_name):
            raise ValidationError("First name is required.")
        if not is_valid_name(user.first_name):
            raise ValidationError("First name contains invalid characters.")

        if is_blank(user.last_name):
            raise ValidationError("Last name is required.")
        if not is_valid_name(user.last_name):
            raise ValidationError("Last name contains invalid characters.")

        if user.birthdate is None:
            raise ValidationError("Birthdate is required.")
        if not is_not_future(user.birthdate):
            raise ValidationError("Birthdate must be a date in the past.")

        if is_blank(user.email):
            raise ValidationError("Email is required.")
        if not is_valid_email(user.email):
            raise ValidationError("Invalid email format.")

    @staticmethod
    def _validate_patch(patch: UserPatch) -> None:
        if patch.supplied("first_name") and not is_valid_name(patch.first_name):
            raise ValidationError(INVALID_FIRST_NAME)
        if patch.supplied("last_name") and not is_valid_name(patch.last_name):
            raise ValidationError(INVALID_LAST_NAME)
        if patch.supplied("email") and not is_valid_email(patch.email):
            raise ValidationError(INVALID_EMAIL)
        if patch.supplied("birthdate") and not is_not_future(patch.birthdate):
            raise ValidationError(INVALID_BIRTHDATE)
