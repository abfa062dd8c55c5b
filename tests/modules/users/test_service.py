"""Tests for the user directory service."""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.passwords import hash_password, verify_password
from modules.messages.models import ReceivedMessage, SentMessage, UserContact
from modules.users.exceptions import UserNotFoundError
from modules.users.models import (
    RegisterRequest,
    RegisteredUser,
    UserCredentials,
    UserProfile,
    UserSummary,
)
from modules.users.service import UserService
from shared.exceptions import AuthenticationError

from tests.conftest import TEST_WORK_FACTOR, create_contact

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def users_repo() -> MagicMock:
    return MagicMock()


@pytest.fixture
def messages_repo() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(users_repo, messages_repo) -> UserService:
    return UserService(users=users_repo, messages=messages_repo, work_factor=TEST_WORK_FACTOR)


@pytest.fixture
def register_request() -> RegisterRequest:
    return RegisterRequest(
        username="test1",
        password="password",
        first_name="Test1",
        last_name="Testy1",
        phone="+14155550000",
    )


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_hashes_password(self, service, users_repo, register_request):
        """The repository should receive a bcrypt hash, never the plaintext."""
        users_repo.create.side_effect = lambda data: RegisteredUser(**data)

        user = await service.register(register_request)

        data = users_repo.create.call_args[0][0]
        assert "password" not in data
        assert data["password_hash"] != "password"
        assert verify_password("password", data["password_hash"])
        assert user.username == "test1"

    @pytest.mark.asyncio
    async def test_register_sets_join_at(self, service, users_repo, register_request):
        users_repo.create.side_effect = lambda data: RegisteredUser(**data)
        before = datetime.now(timezone.utc)

        user = await service.register(register_request)

        assert user.join_at >= before

    @pytest.mark.asyncio
    async def test_register_uses_work_factor(self, users_repo, messages_repo, register_request):
        users_repo.create.side_effect = lambda data: RegisteredUser(**data)
        service = UserService(users=users_repo, messages=messages_repo, work_factor=5)

        user = await service.register(register_request)

        assert "$05$" in user.password_hash


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_correct_password(self, service, users_repo):
        """Correct password returns True and updates last_login_at."""
        users_repo.get_credentials.return_value = UserCredentials(
            username="test1", password_hash=hash_password("password", TEST_WORK_FACTOR)
        )

        assert await service.authenticate("test1", "password") is True
        users_repo.update_login_timestamp.assert_called_once_with("test1")

    @pytest.mark.asyncio
    async def test_wrong_password(self, service, users_repo):
        """Wrong password returns False and leaves last_login_at alone."""
        users_repo.get_credentials.return_value = UserCredentials(
            username="test1", password_hash=hash_password("password", TEST_WORK_FACTOR)
        )

        assert await service.authenticate("test1", "wrong") is False
        users_repo.update_login_timestamp.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user_is_unauthorized(self, service, users_repo):
        """Unknown usernames must fail as Unauthorized, not NotFound."""
        users_repo.get_credentials.return_value = None

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await service.authenticate("nobody", "password")

        assert isinstance(exc_info.value, AuthenticationError)
        assert not isinstance(exc_info.value, UserNotFoundError)
        users_repo.update_login_timestamp.assert_not_called()


class TestLookups:
    @pytest.mark.asyncio
    async def test_get(self, service, users_repo):
        users_repo.get_profile.return_value = UserProfile(
            username="test1", first_name="Test1", last_name="Testy1",
            phone="+14155550000", join_at=NOW,
        )

        profile = await service.get("test1")

        assert profile.username == "test1"
        assert "password_hash" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_get_unknown_user(self, service, users_repo):
        users_repo.get_profile.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.get("nobody")

    @pytest.mark.asyncio
    async def test_all(self, service, users_repo):
        users_repo.list_all.return_value = [
            UserSummary(username="test1", first_name="Test1", last_name="Testy1"),
        ]

        users = await service.all()

        assert [u.username for u in users] == ["test1"]


class TestMessageListings:
    @pytest.mark.asyncio
    async def test_messages_from(self, service, users_repo, messages_repo):
        users_repo.exists.return_value = True
        messages_repo.list_from.return_value = [
            SentMessage(id=1, to_user=UserContact(**create_contact("test2")), body="hello", sent_at=NOW),
        ]

        messages = await service.messages_from("test1")

        assert messages[0].to_user.username == "test2"
        messages_repo.list_from.assert_called_once_with("test1")

    @pytest.mark.asyncio
    async def test_messages_to(self, service, users_repo, messages_repo):
        users_repo.exists.return_value = True
        messages_repo.list_to.return_value = [
            ReceivedMessage(id=1, from_user=UserContact(**create_contact("test1")), body="hello", sent_at=NOW),
        ]

        messages = await service.messages_to("test2")

        assert messages[0].from_user.username == "test1"
        messages_repo.list_to.assert_called_once_with("test2")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["messages_from", "messages_to"])
    async def test_unknown_user(self, service, users_repo, messages_repo, method):
        """Listings for an unknown user fail before touching messages."""
        users_repo.exists.return_value = False

        with pytest.raises(UserNotFoundError):
            await getattr(service, method)("nobody")

        messages_repo.list_from.assert_not_called()
        messages_repo.list_to.assert_not_called()
