"""
Authentication module.

Handles session token issuance/validation and password hashing.

Public API:
- IAuthService: Interface for token operations
- TokenPayload, LoginRequest, TokenResponse: Data models
- hash_password / verify_password / check_password_length: bcrypt helpers
- Auth exceptions: InvalidTokenError, MissingTokenError, InvalidCredentialsError
"""

from .interfaces import IAuthService
from .models import TokenPayload, LoginRequest, TokenResponse
from .passwords import MAX_PASSWORD_BYTES, check_password_length, hash_password, verify_password
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenPayload",
    "LoginRequest",
    "TokenResponse",
    # Passwords
    "MAX_PASSWORD_BYTES",
    "check_password_length",
    "hash_password",
    "verify_password",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
]
