"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from loop.domain.model import Profile
from loop.domain.repository import ProfileRepository
from loop.domain.value import TextContent, UserId, Username
from loop.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by a fresh mock container."""
    return TestClient(create_app(container=build_test_container()))


def bearer(user_id: str | None = None) -> dict[str, str]:
    """Authorization header for a user. Mock tokens are the user ID itself."""
    return {"Authorization": f"Bearer {user_id or uuid4()}"}


def new_user_id() -> UserId:
    return UserId(uuid4())


def text(body: str = "Hello loop") -> TextContent:
    """Text content for test loops."""
    return TextContent(text=body)


async def make_profile(
    profile_repo: ProfileRepository,
    username: str,
    user_id: UserId | None = None,
    display_name: str | None = None,
    is_moderator: bool = False,
    is_admin: bool = False,
) -> Profile:
    """Helper to store a profile for a test user.

    Returns:
        The saved profile
    """
    profile = Profile(
        id=user_id or new_user_id(),
        username=Username(username),
        display_name=display_name,
        is_moderator=is_moderator,
        is_admin=is_admin,
        created_at=datetime.now(),
        updated_at=datetime.now(),
    )
    return await profile_repo.save(profile)
