"""
Error types raised by services and turned into JSON responses by the app.

Every error carries an HTTP status code and a short fixed message. Handlers
never echo internal exception text back to clients.
"""

from fastapi import status


class ProfileAPIError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BadRequestError(ProfileAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request body"


class InvalidVersionError(BadRequestError):
    message = "Version not found"


class UnauthorizedError(ProfileAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"


class ForbiddenError(ProfileAPIError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Not authorized"


class NotFoundError(ProfileAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(ProfileAPIError):
    status_code = status.HTTP_409_CONFLICT
    message = "Already exists"


class VersionConflictError(ConflictError):
    """Raised when a journal changed between read and write."""

    message = "Journal was modified concurrently, reload and retry"


class InternalError(ProfileAPIError):
    pass
