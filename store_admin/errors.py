"""Typed failures raised by the route handlers.

Each error carries the HTTP status and the plain-text reason sent to the
caller. Anything that is not a StoreAdminError is reported as a bare
500 "Internal error" by the catch-all middleware in error_handlers.
"""

from fastapi import status


class StoreAdminError(Exception):
    """Base exception for all failures with a caller-facing status."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StoreAdminError):
    """A required field or path parameter is missing or empty."""
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class AuthenticationError(StoreAdminError):
    """The request carries no caller identity."""
    http_status = status.HTTP_403_FORBIDDEN
    default_message = "Unauthenticated"


class AuthorizationError(StoreAdminError):
    """The store does not exist or belongs to someone else."""
    http_status = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = "Unauthorized"


class LockConflictError(StoreAdminError):
    """The target row has is_locked set."""
    http_status = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(StoreAdminError):
    """Unclassified failure; the message never reaches the caller."""
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal error"
