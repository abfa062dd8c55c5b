"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field, field_validator

from .passwords import check_password_length


class TokenPayload(BaseModel):
    """
    Decoded session token payload.

    The username is the only claim; tokens carry no expiration.
    """

    username: str = Field(..., min_length=1, description="Username of the token holder")


class LoginRequest(BaseModel):
    """Credentials submitted to POST /login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """A password bcrypt cannot hash can never match."""
        return check_password_length(v)


class TokenResponse(BaseModel):
    """Response carrying a freshly issued session token."""

    token: str = Field(..., description="Signed bearer token")
