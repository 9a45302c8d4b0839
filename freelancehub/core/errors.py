"""
Domain errors - one type per failure kind, each carrying its HTTP status.
Rules raise these; the API layer renders them through a single handler.
"""

from fastapi import status
from pydantic import ValidationError as PydanticValidationError


class FreelanceHubError(Exception):
    """Base class for every error surfaced to the presentation layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FreelanceHubError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class DuplicateEmailError(FreelanceHubError):
    """Registration with an email that already belongs to a user."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(FreelanceHubError):
    """Lookup by id or email found nothing."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidTransitionError(FreelanceHubError):
    """Booking status change not allowed from the current status."""

    status_code = status.HTTP_409_CONFLICT


class PermissionDeniedError(FreelanceHubError):
    """Actor does not own the entity or has the wrong role for the action."""

    status_code = status.HTTP_403_FORBIDDEN


class StorageError(FreelanceHubError):
    """Underlying store unavailable, write failed, or a blob is corrupt."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def validation_message(error: PydanticValidationError) -> str:
    """Human-readable first problem of a pydantic ValidationError."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first['msg']}" if field else first["msg"]
