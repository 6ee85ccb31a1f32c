"""
Domain exceptions.

Every exception carries the HTTP status code it maps to, so the transport
layer can translate failures without knowing each concrete type.
"""


class FitnessTrackerError(Exception):
    """Base class for all domain failures."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(FitnessTrackerError, ValueError):
    """Malformed call-level input (null or out-of-range id, missing query argument)."""

    status_code = 400


class ValidationError(InvalidArgumentError):
    """A supplied value fails a field rule (name, email, fragment, date)."""


class NotFoundError(FitnessTrackerError, LookupError):
    """No entity exists for the requested identity."""

    status_code = 404


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int | None):
        super().__init__(f"User with ID={user_id} was not found")
        self.user_id = user_id


class TrainingNotFoundError(NotFoundError):
    def __init__(self, training_id: int | None):
        super().__init__(f"Training with ID={training_id} was not found")
        self.training_id = training_id


class ConflictError(FitnessTrackerError):
    """Stored state contradicts a uniqueness expectation (id or email)."""

    status_code = 409
