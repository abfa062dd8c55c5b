"""
Users module data models.

Store rows are mapped into frozen value models. Only RegisteredUser and
UserCredentials carry the password hash, and neither is ever returned
by a route.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from modules.auth.passwords import check_password_length


class RegisterRequest(BaseModel):
    """Request to register a new user."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Password must fit in bcrypt's input."""
        return check_password_length(v)


class RegisteredUser(BaseModel):
    """Row returned by registration (internal use only)."""

    model_config = {"frozen": True}

    username: str
    password_hash: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime


class UserCredentials(BaseModel):
    """Username and stored hash, used only for the password comparison."""

    model_config = {"frozen": True}

    username: str
    password_hash: str


class UserProfile(BaseModel):
    """Full public profile of a user."""

    model_config = {"frozen": True}

    username: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: Optional[datetime] = None


class UserSummary(BaseModel):
    """Basic info shown in the user directory listing."""

    model_config = {"frozen": True}

    username: str
    first_name: str
    last_name: str


class UserListResponse(BaseModel):
    """Response for GET /users."""

    users: list[UserSummary]


class UserProfileResponse(BaseModel):
    """Response for GET /users/{username}."""

    user: UserProfile
