"""
User directory service implementation.

Registration, password authentication and profile lookups on top of
UserRepository. Message listings delegate to MessageRepository.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from shared.config import get_settings
from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.passwords import hash_password, verify_password
from modules.messages.models import ReceivedMessage, SentMessage
from modules.messages.repository import MessageRepository

from .interfaces import IUserService
from .models import RegisterRequest, RegisteredUser, UserProfile, UserSummary
from .repository import UserRepository
from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User directory service with Supabase backend.

    bcrypt work runs in a worker thread so it doesn't stall the event loop.
    """

    def __init__(
        self,
        users: UserRepository,
        messages: MessageRepository,
        work_factor: Optional[int] = None,
    ):
        self._users = users
        self._messages = messages
        self._work_factor = work_factor or get_settings().bcrypt_work_factor

    async def register(self, request: RegisterRequest) -> RegisteredUser:
        """Hash the password and store the new user."""
        password_hash = await asyncio.to_thread(
            hash_password, request.password, self._work_factor
        )

        data = {
            "username": request.username,
            "password_hash": password_hash,
            "first_name": request.first_name,
            "last_name": request.last_name,
            "phone": request.phone,
            "join_at": datetime.now(timezone.utc).isoformat(),
        }

        user = self._users.create(data)
        logger.info("Registered user %s", user.username)
        return user

    async def authenticate(self, username: str, password: str) -> bool:
        """Compare the password against the stored hash."""
        credentials = self._users.get_credentials(username)
        if credentials is None:
            logger.warning("Login attempt for unknown user %s", username)
            raise InvalidCredentialsError()

        matched = await asyncio.to_thread(
            verify_password, password, credentials.password_hash
        )
        if not matched:
            logger.warning("Wrong password for user %s", username)
            return False

        self._users.update_login_timestamp(username)
        logger.info("User %s logged in", username)
        return True

    async def get(self, username: str) -> UserProfile:
        """Get a user's profile."""
        profile = self._users.get_profile(username)
        if profile is None:
            raise UserNotFoundError(username)
        return profile

    async def all(self) -> list[UserSummary]:
        """List all users ordered by username."""
        return self._users.list_all()

    async def messages_from(self, username: str) -> list[SentMessage]:
        """Messages sent by a user."""
        self._ensure_exists(username)
        return self._messages.list_from(username)

    async def messages_to(self, username: str) -> list[ReceivedMessage]:
        """Messages received by a user."""
        self._ensure_exists(username)
        return self._messages.list_to(username)

    def _ensure_exists(self, username: str) -> None:
        if not self._users.exists(username):
            raise UserNotFoundError(username)
