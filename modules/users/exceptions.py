"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ConflictError


class UserNotFoundError(NotFoundError):
    """Raised when a username does not resolve to a user."""

    def __init__(self, username: str):
        super().__init__(
            f"No such user: {username}",
            code="USER_NOT_FOUND",
            details={"username": username},
        )


class UsernameTakenError(ConflictError):
    """Raised when registration hits the username uniqueness constraint."""

    def __init__(self, username: str):
        super().__init__(
            f"Username already taken: {username}",
            code="USERNAME_TAKEN",
            details={"username": username},
        )
