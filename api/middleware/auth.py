"""
Session token authentication middleware.

Resolves the caller identity from a signed session token. The token is
read from the `_token` query parameter, then the `_token` JSON body
field, then an `Authorization: Bearer` header.

Failures raise the auth module's AuthenticationError subclasses, which the
app renders as 401 with the standard error body.
"""

import logging
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

TOKEN_FIELD = "_token"

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
) -> Optional[str]:
    """
    Find the session token on a request.

    Args:
        request: Incoming request
        credentials: Parsed Authorization header, if any

    Returns:
        The raw token string, or None if the request carries none
    """
    token = request.query_params.get(TOKEN_FIELD)
    if token:
        return token

    if request.method in ("POST", "PUT", "PATCH"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get(TOKEN_FIELD), str):
            return body[TOKEN_FIELD]

    if credentials is not None:
        return credentials.credentials

    return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for every endpoint except login, register and health.
    The identity is also stored on request.state.user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"username": user.username}

    Raises:
        MissingTokenError: If the request carries no token
        InvalidTokenError: If the token does not verify
    """
    token = await extract_token(request, credentials)
    if not token:
        raise MissingTokenError()

    try:
        user = await auth.validate_token(token)
    except AuthenticationError as e:
        logger.debug("Rejected request to %s: %s", request.url.path, e.message)
        raise

    request.state.user = user
    return user
