"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for session token operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    def issue_token(self, username: str) -> str:
        """
        Issue a signed session token for a user.

        Args:
            username: Username to bind into the token

        Returns:
            Signed token string (no expiration)
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the caller identity.

        Args:
            token: Token previously produced by issue_token

        Returns:
            AuthenticatedUser with the embedded username

        Raises:
            AuthenticationError: If token is missing, malformed or forged
        """
        ...
