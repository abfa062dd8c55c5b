"""
Message repository for database access.

Encapsulates all Supabase queries and data mapping for the messages table.
Participant profiles are loaded through PostgREST embedded joins on the
two foreign keys into users.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.database import FOREIGN_KEY_VIOLATION
from shared.repository import BaseRepository
from modules.users.exceptions import UserNotFoundError
from .models import (
    CreatedMessage,
    MessageDetail,
    MessageReadReceipt,
    ReceivedMessage,
    SentMessage,
    UserContact,
)

FROM_USER_FKEY = "messages_from_username_fkey"
TO_USER_FKEY = "messages_to_username_fkey"

CONTACT_COLUMNS = "username, first_name, last_name, phone"
FROM_USER_EMBED = f"from_user:users!{FROM_USER_FKEY}({CONTACT_COLUMNS})"
TO_USER_EMBED = f"to_user:users!{TO_USER_FKEY}({CONTACT_COLUMNS})"
MESSAGE_COLUMNS = "id, body, sent_at, read_at"


class MessageRepository(BaseRepository[MessageDetail]):
    """
    Repository for message data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying sender/recipient.
    """

    def create(self, from_username: str, to_username: str, body: str) -> CreatedMessage:
        """
        Insert a new message with sent_at = now and read_at = null.

        Raises:
            UserNotFoundError: If the sender or the recipient does not exist.
        """
        data = {
            "from_username": from_username,
            "to_username": to_username,
            "body": body,
            "sent_at": datetime.now(timezone.utc).isoformat(),
        }

        try:
            result = self._db.table("messages").insert(data).execute()
        except APIError as e:
            if self._is_constraint_violation(e, FOREIGN_KEY_VIOLATION):
                # Postgres names the violated constraint in the error text
                violated = f"{e.message or ''} {e.details or ''}"
                missing = from_username if FROM_USER_FKEY in violated else to_username
                raise UserNotFoundError(missing) from e
            raise

        return CreatedMessage(**result.data[0])

    def get(self, message_id: int) -> Optional[MessageDetail]:
        """Get a message with both participants, or None if absent."""
        result = self._db.table("messages").select(
            f"{MESSAGE_COLUMNS}, {FROM_USER_EMBED}, {TO_USER_EMBED}"
        ).eq("id", message_id).execute()

        if not result.data:
            return None
        return self._map_to_detail(result.data[0])

    def mark_read(self, message_id: int) -> Optional[MessageReadReceipt]:
        """
        Set read_at to the current time in a single update.

        Returns:
            The receipt, or None if the id does not exist.
        """
        data = {"read_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("messages").update(data).eq("id", message_id).execute()

        if not result.data:
            return None
        row = result.data[0]
        return MessageReadReceipt(id=row["id"], read_at=row["read_at"])

    def list_from(self, username: str) -> list[SentMessage]:
        """Messages sent by a user, each with the recipient profile."""
        result = self._db.table("messages").select(
            f"{MESSAGE_COLUMNS}, {TO_USER_EMBED}"
        ).eq("from_username", username).order("id").execute()

        return [
            SentMessage(
                id=row["id"],
                to_user=self._map_to_contact(row["to_user"]),
                body=row["body"],
                sent_at=row["sent_at"],
                read_at=row.get("read_at"),
            )
            for row in result.data
        ]

    def list_to(self, username: str) -> list[ReceivedMessage]:
        """Messages received by a user, each with the sender profile."""
        result = self._db.table("messages").select(
            f"{MESSAGE_COLUMNS}, {FROM_USER_EMBED}"
        ).eq("to_username", username).order("id").execute()

        return [
            ReceivedMessage(
                id=row["id"],
                from_user=self._map_to_contact(row["from_user"]),
                body=row["body"],
                sent_at=row["sent_at"],
                read_at=row.get("read_at"),
            )
            for row in result.data
        ]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_detail(self, data: dict[str, Any]) -> MessageDetail:
        """Map a joined row to MessageDetail."""
        return MessageDetail(
            id=data["id"],
            body=data["body"],
            sent_at=data["sent_at"],
            read_at=data.get("read_at"),
            from_user=self._map_to_contact(data["from_user"]),
            to_user=self._map_to_contact(data["to_user"]),
        )

    def _map_to_contact(self, data: dict[str, Any]) -> UserContact:
        """Map an embedded users row to UserContact."""
        return UserContact(
            username=data["username"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            phone=data["phone"],
        )
