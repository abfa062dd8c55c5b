"""
Login and registration endpoints.

Both routes are public and answer with a freshly issued session token.
"""

from fastapi import APIRouter, Depends

from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.interfaces import IAuthService
from modules.auth.models import LoginRequest, TokenResponse
from modules.users.interfaces import IUserService
from modules.users.models import RegisterRequest
from ..dependencies import get_auth_service, get_user_service

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    users: IUserService = Depends(get_user_service),
    auth: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange a username and password for a token.

    Unknown usernames and wrong passwords both answer 401.
    """
    if not await users.authenticate(request.username, request.password):
        raise InvalidCredentialsError()
    return TokenResponse(token=auth.issue_token(request.username))


@router.post("/register", response_model=TokenResponse)
async def register(
    request: RegisterRequest,
    users: IUserService = Depends(get_user_service),
    auth: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Register a new user and log them in.

    A duplicate username answers 409.
    """
    user = await users.register(request)
    return TokenResponse(token=auth.issue_token(user.username))
