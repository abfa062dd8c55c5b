"""
Users module interface.

The API layer depends on IUserService for registration, login and the
user directory.
"""

from typing import Protocol, runtime_checkable

from modules.messages.models import ReceivedMessage, SentMessage
from .models import RegisterRequest, RegisteredUser, UserProfile, UserSummary


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user directory operations.
    """

    async def register(self, request: RegisterRequest) -> RegisteredUser:
        """
        Register a new user.

        The password is hashed before storage and join_at is set to now.
        The returned model includes the hash; callers must not expose it.

        Raises:
            UsernameTakenError: If the username already exists
        """
        ...

    async def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair.

        Returns True and updates last_login_at on a match, False on a
        wrong password.

        Raises:
            InvalidCredentialsError: If the username does not exist
        """
        ...

    async def get(self, username: str) -> UserProfile:
        """
        Get a user's profile.

        Raises:
            UserNotFoundError: If the username does not exist
        """
        ...

    async def all(self) -> list[UserSummary]:
        """List all users ordered by username."""
        ...

    async def messages_from(self, username: str) -> list[SentMessage]:
        """
        Messages sent by a user.

        Raises:
            UserNotFoundError: If the username does not exist
        """
        ...

    async def messages_to(self, username: str) -> list[ReceivedMessage]:
        """
        Messages received by a user.

        Raises:
            UserNotFoundError: If the username does not exist
        """
        ...
