"""
User-related exceptions.
"""

from .base import StoreException, NotFoundException, ForbiddenException, AuthenticationException


class UserException(StoreException):
    """Base exception for user-related errors."""
    pass


class UserNotFoundException(UserException, NotFoundException):
    """Raised when user is not found in database."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            details={'user_id': user_id}
        )
        self.user_id = user_id


class AdminRequiredException(UserException, ForbiddenException):
    """Raised when a non-admin calls an admin-only operation."""

    def __init__(self, user_id: int):
        super().__init__(
            "Admin role required",
            details={'user_id': user_id}
        )
        self.user_id = user_id


class InvalidIdentityException(UserException, AuthenticationException):
    """Raised when the identity headers are missing or cannot be parsed."""

    def __init__(self, message: str, user_id: str | None = None, role: str | None = None):
        details = {}
        if user_id is not None:
            details['user_id'] = user_id
        if role is not None:
            details['role'] = role
        super().__init__(message, details=details)
