"""
Messages module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class MessageNotFoundError(NotFoundError):
    """Raised when a message id does not exist."""

    def __init__(self, message_id: int):
        super().__init__(
            f"No such message: {message_id}",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )


class MessageAccessDeniedError(AuthorizationError):
    """Raised when the caller is neither sender nor recipient."""

    def __init__(self, message_id: int, username: str):
        super().__init__(
            f"Access denied to message: {message_id}",
            code="MESSAGE_ACCESS_DENIED",
            details={"message_id": message_id, "username": username},
        )


class MarkReadDeniedError(AuthorizationError):
    """Raised when someone other than the recipient marks a message read."""

    def __init__(self, message_id: int, username: str):
        super().__init__(
            f"Only the recipient can mark message {message_id} as read",
            code="MARK_READ_DENIED",
            details={"message_id": message_id, "username": username},
        )
