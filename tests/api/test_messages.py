"""
Tests for message API endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_message_service
from modules.messages.exceptions import (
    MessageNotFoundError,
    MessageAccessDeniedError,
    MarkReadDeniedError,
)
from modules.messages.models import (
    CreatedMessage,
    MessageDetail,
    MessageReadReceipt,
    UserContact,
)
from modules.users.exceptions import UserNotFoundError

from tests.conftest import create_contact, create_test_token

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def message_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(auth_service, message_service):
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_message_service] = lambda: message_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_message() -> MessageDetail:
    return MessageDetail(
        id=1,
        body="hello",
        sent_at=NOW,
        read_at=None,
        from_user=UserContact(**create_contact("test1", "Test1", "Testy1")),
        to_user=UserContact(**create_contact("test2", "Test2", "Testy2")),
    )


class TestGetMessage:
    """Tests for GET /messages/{id}"""

    def test_get_message(self, client, message_service, mock_message):
        message_service.get_for_user.return_value = mock_message

        response = client.get("/messages/1", params={"_token": create_test_token("test1")})

        assert response.status_code == 200
        message = response.json()["message"]
        assert message["id"] == 1
        assert message["body"] == "hello"
        assert isinstance(message["sent_at"], str)
        assert message["read_at"] is None
        assert message["from_user"] == create_contact("test1", "Test1", "Testy1")
        assert message["to_user"] == create_contact("test2", "Test2", "Testy2")
        message_service.get_for_user.assert_awaited_once_with(1, "test1")

    def test_get_message_forbidden(self, client, message_service):
        message_service.get_for_user.side_effect = MessageAccessDeniedError(1, "test3")

        response = client.get("/messages/1", params={"_token": create_test_token("test3")})

        assert response.status_code == 403
        assert response.json()["error"] == "MESSAGE_ACCESS_DENIED"

    def test_get_unknown_message(self, client, message_service):
        message_service.get_for_user.side_effect = MessageNotFoundError(0)

        response = client.get("/messages/0", params={"_token": create_test_token("test1")})

        assert response.status_code == 404

    def test_non_numeric_id(self, client, message_service):
        response = client.get("/messages/abc", params={"_token": create_test_token("test1")})

        assert response.status_code == 400
        message_service.get_for_user.assert_not_called()


class TestSendMessage:
    """Tests for POST /messages"""

    def test_send_message(self, client, message_service):
        message_service.create.return_value = CreatedMessage(
            id=1, from_username="test1", to_username="test2", body="hello", sent_at=NOW,
        )

        response = client.post(
            "/messages",
            json={"to_username": "test2", "body": "hello", "_token": create_test_token("test1")},
        )

        assert response.status_code == 201
        message = response.json()["message"]
        assert set(message) == {"id", "from_username", "to_username", "body", "sent_at"}
        assert message["from_username"] == "test1"

        from_username, request = message_service.create.call_args[0]
        assert from_username == "test1"
        assert request.to_username == "test2"
        assert request.body == "hello"

    def test_sender_comes_from_token(self, client, message_service):
        """A from_username in the body is ignored."""
        message_service.create.return_value = CreatedMessage(
            id=1, from_username="test1", to_username="test2", body="hello", sent_at=NOW,
        )

        client.post(
            "/messages",
            json={
                "from_username": "test2",
                "to_username": "test2",
                "body": "hello",
                "_token": create_test_token("test1"),
            },
        )

        assert message_service.create.call_args[0][0] == "test1"

    @pytest.mark.parametrize("missing", ["to_username", "body"])
    def test_missing_fields(self, client, message_service, missing):
        payload = {"to_username": "test2", "body": "hello", "_token": create_test_token("test1")}
        del payload[missing]

        response = client.post("/messages", json=payload)

        assert response.status_code == 400
        message_service.create.assert_not_called()

    def test_unknown_recipient(self, client, message_service):
        message_service.create.side_effect = UserNotFoundError("nobody")

        response = client.post(
            "/messages",
            json={"to_username": "nobody", "body": "hello", "_token": create_test_token("test1")},
        )

        assert response.status_code == 404

    def test_bearer_header(self, client, message_service, auth_headers):
        message_service.create.return_value = CreatedMessage(
            id=1, from_username="test1", to_username="test2", body="hello", sent_at=NOW,
        )

        response = client.post(
            "/messages",
            json={"to_username": "test2", "body": "hello"},
            headers=auth_headers,
        )

        assert response.status_code == 201


class TestMarkRead:
    """Tests for POST /messages/{id}/read"""

    def test_mark_read(self, client, message_service):
        message_service.mark_read_for_user.return_value = MessageReadReceipt(id=1, read_at=NOW)

        response = client.post("/messages/1/read", json={"_token": create_test_token("test2")})

        assert response.status_code == 200
        message = response.json()["message"]
        assert set(message) == {"id", "read_at"}
        assert message["read_at"] is not None

    def test_mark_read_by_sender(self, client, message_service):
        message_service.mark_read_for_user.side_effect = MarkReadDeniedError(1, "test1")

        response = client.post("/messages/1/read", json={"_token": create_test_token("test1")})

        assert response.status_code == 403
        assert response.json()["error"] == "MARK_READ_DENIED"

    def test_mark_read_unknown_message(self, client, message_service):
        message_service.mark_read_for_user.side_effect = MessageNotFoundError(0)

        response = client.post("/messages/0/read", json={"_token": create_test_token("test2")})

        assert response.status_code == 404
