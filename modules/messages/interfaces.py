"""
Messages module interface.

The API layer depends on IMessageService for all message operations.
"""

from typing import Protocol, runtime_checkable

from .models import (
    CreatedMessage,
    MessageDetail,
    MessageReadReceipt,
    SendMessageRequest,
)


@runtime_checkable
class IMessageService(Protocol):
    """
    Interface for message operations.

    The plain get/mark_read methods do no authorization. The *_for_user
    variants fetch first and then check the caller against the
    participants, so an unknown id is always reported as not found.
    """

    async def create(
        self,
        from_username: str,
        request: SendMessageRequest,
    ) -> CreatedMessage:
        """
        Send a message.

        Args:
            from_username: Authenticated sender
            request: Recipient and body

        Returns:
            The stored message (read_at is null)

        Raises:
            UserNotFoundError: If the recipient does not exist
        """
        ...

    async def get(self, message_id: int) -> MessageDetail:
        """
        Get a message with both participants.

        Raises:
            MessageNotFoundError: If the id does not exist
        """
        ...

    async def mark_read(self, message_id: int) -> MessageReadReceipt:
        """
        Set read_at to now, overwriting any earlier value.

        Raises:
            MessageNotFoundError: If the id does not exist
        """
        ...

    async def get_for_user(self, message_id: int, username: str) -> MessageDetail:
        """
        Get a message on behalf of a caller.

        Raises:
            MessageNotFoundError: If the id does not exist
            MessageAccessDeniedError: If the caller is neither sender nor recipient
        """
        ...

    async def mark_read_for_user(self, message_id: int, username: str) -> MessageReadReceipt:
        """
        Mark a message read on behalf of a caller.

        Raises:
            MessageNotFoundError: If the id does not exist
            MarkReadDeniedError: If the caller is not the recipient
        """
        ...
