"""
Message service implementation.

Creation, lookup and read-marking of direct messages, plus the
sender/recipient access policy.
"""

import logging

from modules.users.exceptions import UserNotFoundError
from modules.users.repository import UserRepository

from .interfaces import IMessageService
from .models import (
    CreatedMessage,
    MessageDetail,
    MessageReadReceipt,
    SendMessageRequest,
)
from .repository import MessageRepository
from .exceptions import (
    MessageNotFoundError,
    MessageAccessDeniedError,
    MarkReadDeniedError,
)

logger = logging.getLogger(__name__)


class MessageService(IMessageService):
    """
    Message service with Supabase backend.

    Implements IMessageService protocol with real database operations.
    """

    def __init__(self, messages: MessageRepository, users: UserRepository):
        self._messages = messages
        self._users = users

    async def create(
        self,
        from_username: str,
        request: SendMessageRequest,
    ) -> CreatedMessage:
        """Store a message from an authenticated sender."""
        if not self._users.exists(request.to_username):
            raise UserNotFoundError(request.to_username)

        message = self._messages.create(from_username, request.to_username, request.body)
        logger.info(
            "Message %s sent from %s to %s",
            message.id, message.from_username, message.to_username,
        )
        return message

    async def get(self, message_id: int) -> MessageDetail:
        """Get a message with both participants."""
        message = self._messages.get(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)
        return message

    async def mark_read(self, message_id: int) -> MessageReadReceipt:
        """Set read_at to now."""
        receipt = self._messages.mark_read(message_id)
        if receipt is None:
            raise MessageNotFoundError(message_id)
        logger.info("Message %s marked read", message_id)
        return receipt

    async def get_for_user(self, message_id: int, username: str) -> MessageDetail:
        """Get a message if the caller sent or received it."""
        message = await self.get(message_id)

        if username not in (message.from_user.username, message.to_user.username):
            logger.warning("User %s denied access to message %s", username, message_id)
            raise MessageAccessDeniedError(message_id, username)

        return message

    async def mark_read_for_user(self, message_id: int, username: str) -> MessageReadReceipt:
        """Mark a message read if the caller is its recipient."""
        message = await self.get(message_id)

        if username != message.to_user.username:
            logger.warning("User %s may not mark message %s read", username, message_id)
            raise MarkReadDeniedError(message_id, username)

        return await self.mark_read(message_id)
