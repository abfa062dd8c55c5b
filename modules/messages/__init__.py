"""
Messages module.

Handles direct message creation, retrieval and read-marking, and the
sender/recipient access policy.

Public API:
- IMessageService: Interface for message operations
- MessageDetail, CreatedMessage, MessageReadReceipt, ...: Data models
- MessageNotFoundError, MessageAccessDeniedError, MarkReadDeniedError: Exceptions
"""

from .interfaces import IMessageService
from .models import (
    UserContact,
    SendMessageRequest,
    CreatedMessage,
    MessageDetail,
    MessageReadReceipt,
    SentMessage,
    ReceivedMessage,
)
from .exceptions import (
    MessageNotFoundError,
    MessageAccessDeniedError,
    MarkReadDeniedError,
)

__all__ = [
    # Interface
    "IMessageService",
    # Models
    "UserContact",
    "SendMessageRequest",
    "CreatedMessage",
    "MessageDetail",
    "MessageReadReceipt",
    "SentMessage",
    "ReceivedMessage",
    # Exceptions
    "MessageNotFoundError",
    "MessageAccessDeniedError",
    "MarkReadDeniedError",
]
