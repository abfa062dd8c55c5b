"""
Message API endpoints.

All routes require a valid session token. Lookups fetch the message
first, so an unknown id is 404 for everyone; a known id the caller may
not touch is 403.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_message_service
from shared.models import AuthenticatedUser

from .interfaces import IMessageService
from .models import (
    CreatedMessageResponse,
    MessageResponse,
    ReadReceiptResponse,
    SendMessageRequest,
)

router = APIRouter()


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> MessageResponse:
    """
    Get a message with sender and recipient profiles.

    Only the sender or the recipient may view it.
    """
    message = await service.get_for_user(message_id, user.username)
    return MessageResponse(message=message)


@router.post("", response_model=CreatedMessageResponse, status_code=201)
async def send_message(
    request: SendMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> CreatedMessageResponse:
    """
    Send a message from the current user.
    """
    message = await service.create(user.username, request)
    return CreatedMessageResponse(message=message)


@router.post("/{message_id}/read", response_model=ReadReceiptResponse)
async def mark_message_read(
    message_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> ReadReceiptResponse:
    """
    Mark a message as read.

    Only the recipient may do this.
    """
    receipt = await service.mark_read_for_user(message_id, user.username)
    return ReadReceiptResponse(message=receipt)
