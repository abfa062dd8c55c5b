"""
User directory endpoints.

All routes require a valid session token.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser
from modules.messages.models import ReceivedMessageListResponse, SentMessageListResponse

from .interfaces import IUserService
from .models import UserListResponse, UserProfileResponse

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserListResponse:
    """
    List all users, ordered by username.
    """
    return UserListResponse(users=await service.all())


@router.get("/{username}", response_model=UserProfileResponse)
async def get_user(
    username: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfileResponse:
    """
    Get a user's profile.
    """
    return UserProfileResponse(user=await service.get(username))


@router.get("/{username}/from", response_model=SentMessageListResponse)
async def get_messages_from(
    username: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> SentMessageListResponse:
    """
    Messages sent by a user, each with the recipient's profile.
    """
    return SentMessageListResponse(messages=await service.messages_from(username))


@router.get("/{username}/to", response_model=ReceivedMessageListResponse)
async def get_messages_to(
    username: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ReceivedMessageListResponse:
    """
    Messages received by a user, each with the sender's profile.
    """
    return ReceivedMessageListResponse(messages=await service.messages_to(username))
