"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Repositories receive the storage client explicitly and
services receive their repositories, so tests can swap any layer.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.messages.interfaces import IMessageService
    from modules.messages.repository import MessageRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._message_repository: "MessageRepository | None" = None
        self._user_service: "IUserService | None" = None
        self._message_service: "IMessageService | None" = None

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def message_repository(self) -> "MessageRepository":
        """Get the message repository instance."""
        if self._message_repository is None:
            from modules.messages.repository import MessageRepository
            self._message_repository = MessageRepository(self.db)
        return self._message_repository

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                users=self.user_repository,
                messages=self.message_repository,
            )
        return self._user_service

    @property
    def messages(self) -> "IMessageService":
        """Get the message service instance."""
        if self._message_service is None:
            from modules.messages.service import MessageService
            self._message_service = MessageService(
                messages=self.message_repository,
                users=self.user_repository,
            )
        return self._message_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._auth_service = None
        self._user_repository = None
        self._message_repository = None
        self._user_service = None
        self._message_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_message_service() -> "IMessageService":
    """FastAPI dependency for message service."""
    return get_container().messages
