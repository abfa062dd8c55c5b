"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents the caller identity for the current request.

    This model is populated from the verified session token and made
    available to route handlers via dependency injection.
    """

    username: str = Field(..., description="Username bound into the session token")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
