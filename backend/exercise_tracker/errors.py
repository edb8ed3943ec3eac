"""
Error taxonomy shared by the services and mapped to HTTP in ``main``.

Services raise these; exception handlers turn them into
``{"error": message}`` bodies with the matching status code.
"""
from fastapi import status


class TrackerError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TrackerError):
    """Missing or malformed caller input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "invalid input"


class NotFoundError(TrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "user not found"


class ServerError(TrackerError):
    """Persistence failure, or a recovery path that failed itself."""


class ConflictRecoveredError(TrackerError):
    """Username already taken; the registry returns the stored user and logs this message."""
    status_code = status.HTTP_409_CONFLICT
    default_message = "username already exists"
