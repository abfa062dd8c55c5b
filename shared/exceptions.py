"""
Base exception classes for the Messagely backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code.
"""

from typing import Optional, Any


class MessagelyError(Exception):
    """
    Base exception for all Messagely errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(MessagelyError):
    """Input validation failed (missing or malformed fields)."""

    status_code = 400


class AuthenticationError(MessagelyError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(MessagelyError):
    """Authenticated, but not permitted to act on this resource."""

    status_code = 403


class NotFoundError(MessagelyError):
    """Resource not found."""

    status_code = 404


class ConflictError(MessagelyError):
    """Write rejected by a storage uniqueness constraint."""

    status_code = 409
