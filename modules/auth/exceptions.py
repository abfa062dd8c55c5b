"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is malformed or its signature is bad."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a login cannot be completed.

    Used for both unknown usernames and wrong passwords so callers
    cannot tell the two apart.
    """

    def __init__(self, message: str = "Invalid username/password"):
        super().__init__(message, code="INVALID_CREDENTIALS")
