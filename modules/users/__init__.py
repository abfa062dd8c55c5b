"""
Users module.

Handles registration, password authentication and the user directory.

Public API:
- IUserService: Interface for user operations
- RegisterRequest, RegisteredUser, UserProfile, UserSummary: Data models
- UserNotFoundError, UsernameTakenError: Exceptions
"""

from .interfaces import IUserService
from .models import (
    RegisterRequest,
    RegisteredUser,
    UserCredentials,
    UserProfile,
    UserSummary,
    UserListResponse,
    UserProfileResponse,
)
from .exceptions import UserNotFoundError, UsernameTakenError

__all__ = [
    # Interface
    "IUserService",
    # Models
    "RegisterRequest",
    "RegisteredUser",
    "UserCredentials",
    "UserProfile",
    "UserSummary",
    "UserListResponse",
    "UserProfileResponse",
    # Exceptions
    "UserNotFoundError",
    "UsernameTakenError",
]
