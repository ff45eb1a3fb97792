"""
Base exception classes for the store backend.
"""


class StoreException(Exception):
    """
    Base exception for all store errors.

    All custom exceptions in the store should inherit from this class.
    This allows catching all store-specific exceptions with a single handler.

    Attributes:
        message: Human-readable error message
        details: Optional dict with additional context (entity IDs, quantities, etc.)
    """

    def __init__(self, message: str, details: dict | None = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            details: Optional dict with additional context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation with context."""
        if self.details:
            details_str = ', '.join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.__class__.__name__}('{self.message}', {details_str})"
        return f"{self.__class__.__name__}('{self.message}')"


# Error kinds. Domain exceptions inherit from exactly one of these; the HTTP
# layer maps the kind to a status code.

class NotFoundException(StoreException):
    """Referenced entity does not exist or is not visible to the caller."""
    pass


class InvalidRequestException(StoreException):
    """Request violates a business precondition."""
    pass


class ForbiddenException(StoreException):
    """Caller lacks the ownership or role required for the resource."""
    pass


class ConflictException(StoreException):
    """Uniqueness or referential conflict."""
    pass


class AuthenticationException(StoreException):
    """Caller identity is missing or malformed."""
    pass
