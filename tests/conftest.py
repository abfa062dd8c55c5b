"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import AuthService, reset_auth_service


# Test signing secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Lowest cost bcrypt accepts, keeps hashing fast in tests
TEST_WORK_FACTOR = 4


def create_test_token(username: str = "test1", secret: str = TEST_JWT_SECRET) -> str:
    """
    Create a session token the way POST /login does.

    Args:
        username: Username to bind into the token
        secret: Signing secret (pass a different one to forge a bad token)

    Returns:
        Token string
    """
    return jwt.encode({"username": username}, secret, algorithm="HS256")


def create_user_row(
    username: str = "test1",
    first_name: str = "Test1",
    last_name: str = "Testy1",
    phone: str = "+14155550000",
    **extra,
) -> dict:
    """Helper to create a users table row as Supabase returns it."""
    row = {
        "username": username,
        "first_name": first_name,
        "last_name": last_name,
        "phone": phone,
        "join_at": "2024-01-01T12:00:00+00:00",
        "last_login_at": None,
    }
    row.update(extra)
    return row


def create_contact(username: str = "test1", first_name: str = "Test1", last_name: str = "Testy1") -> dict:
    """Helper to create an embedded participant as PostgREST returns it."""
    return {
        "username": username,
        "first_name": first_name,
        "last_name": last_name,
        "phone": "+14155550000",
    }


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the auth service and the service container around each test."""
    reset_auth_service()
    reset_container()
    yield
    reset_auth_service()
    reset_container()


@pytest.fixture
def auth_service() -> AuthService:
    """Auth service signing with the test secret."""
    return AuthService(secret_key=TEST_JWT_SECRET, algorithm="HS256")


@pytest.fixture
def auth_token() -> str:
    """A valid token for test1."""
    return create_test_token("test1")


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
