"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.database import UNIQUE_VIOLATION
from shared.repository import BaseRepository
from .models import RegisteredUser, UserCredentials, UserProfile, UserSummary
from .exceptions import UserNotFoundError, UsernameTakenError

PROFILE_COLUMNS = "username, first_name, last_name, phone, join_at, last_login_at"
SUMMARY_COLUMNS = "username, first_name, last_name"


class UserRepository(BaseRepository[UserProfile]):
    """
    Repository for user data access.

    Note: This repository does NOT hash passwords or check credentials.
    The service layer is responsible for both.
    """

    def create(self, data: dict[str, Any]) -> RegisteredUser:
        """
        Insert a new user row.

        Args:
            data: username, password_hash, first_name, last_name, phone, join_at

        Returns:
            The stored row, including the hash.

        Raises:
            UsernameTakenError: If the username already exists.
        """
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if self._is_constraint_violation(e, UNIQUE_VIOLATION):
                raise UsernameTakenError(data["username"]) from e
            raise

        return RegisteredUser(**result.data[0])

    def get_credentials(self, username: str) -> Optional[UserCredentials]:
        """Load the stored password hash for a user, or None if absent."""
        result = self._db.table("users").select(
            "username, password_hash"
        ).eq("username", username).execute()

        if not result.data:
            return None
        return UserCredentials(**result.data[0])

    def update_login_timestamp(self, username: str) -> None:
        """
        Set last_login_at to the current time.

        Raises:
            UserNotFoundError: If no row was updated.
        """
        data = {"last_login_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("users").update(data).eq("username", username).execute()

        if not result.data:
            raise UserNotFoundError(username)

    def get_profile(self, username: str) -> Optional[UserProfile]:
        """Get a user's profile (never the hash), or None if absent."""
        result = self._db.table("users").select(PROFILE_COLUMNS).eq("username", username).execute()

        if not result.data:
            return None
        return UserProfile(**result.data[0])

    def list_all(self) -> list[UserSummary]:
        """List every user ordered by username."""
        result = self._db.table("users").select(SUMMARY_COLUMNS).order("username").execute()
        return [UserSummary(**row) for row in result.data]

    def exists(self, username: str) -> bool:
        """Check whether a username resolves to a user."""
        result = self._db.table("users").select("username").eq("username", username).execute()
        return bool(result.data)
