"""
Authentication service implementation.

Issues and validates HS256 session tokens signed with the shared secret.
"""

import logging
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import TokenPayload
from .exceptions import InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens bind only the username and never expire; verification is
    purely signature based, with no server-side session lookup.
    """

    def __init__(self, secret_key: Optional[str] = None, algorithm: Optional[str] = None):
        settings = get_settings()
        self._secret_key = secret_key or settings.secret_key
        self._algorithm = algorithm or settings.jwt_algorithm

    def issue_token(self, username: str) -> str:
        """Sign a token carrying the username as its sole claim."""
        payload = TokenPayload(username=username)
        return jwt.encode(payload.model_dump(), self._secret_key, algorithm=self._algorithm)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the caller identity.

        Any decode failure is reported as InvalidTokenError.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
            token_payload = TokenPayload(**payload)
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token: %s", e)
            raise InvalidTokenError()
        except PydanticValidationError:
            logger.debug("Rejected session token without a username claim")
            raise InvalidTokenError()

        return AuthenticatedUser(username=token_payload.username)


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
