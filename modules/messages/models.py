"""
Messages module data models.

Every stored message has exactly one shape; the variants below are the
projections the store returns for each query.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class UserContact(BaseModel):
    """Profile fields of a sender or recipient embedded in a message."""

    model_config = {"frozen": True}

    username: str
    first_name: str
    last_name: str
    phone: str


class SendMessageRequest(BaseModel):
    """Request body for POST /messages."""

    to_username: str = Field(..., min_length=1, description="Recipient username")
    body: str = Field(..., min_length=1, description="Message text")


class CreatedMessage(BaseModel):
    """Message as returned right after creation."""

    model_config = {"frozen": True}

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime


class MessageDetail(BaseModel):
    """Full message with both participants' profiles."""

    model_config = {"frozen": True}

    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
    from_user: UserContact
    to_user: UserContact


class MessageReadReceipt(BaseModel):
    """Result of marking a message read."""

    model_config = {"frozen": True}

    id: int
    read_at: datetime


class SentMessage(BaseModel):
    """Outbox entry: message plus the recipient profile."""

    model_config = {"frozen": True}

    id: int
    to_user: UserContact
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ReceivedMessage(BaseModel):
    """Inbox entry: message plus the sender profile."""

    model_config = {"frozen": True}

    id: int
    from_user: UserContact
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    """Envelope for GET /messages/{id}."""

    message: MessageDetail


class CreatedMessageResponse(BaseModel):
    """Envelope for POST /messages."""

    message: CreatedMessage


class ReadReceiptResponse(BaseModel):
    """Envelope for POST /messages/{id}/read."""

    message: MessageReadReceipt


class SentMessageListResponse(BaseModel):
    """Envelope for GET /users/{username}/from."""

    messages: list[SentMessage]


class ReceivedMessageListResponse(BaseModel):
    """Envelope for GET /users/{username}/to."""

    messages: list[ReceivedMessage]
