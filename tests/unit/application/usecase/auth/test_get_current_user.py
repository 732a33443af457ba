"""Unit tests for GetCurrentUserUseCase."""

import pytest

from loop.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from loop.domain.error import AuthenticationError
from loop.domain.repository import ProfileRepository
from loop.domain.value import Capability
from tests.conftest import make_profile, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_user_without_profile(self, unit_env):
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        user_id = new_user_id()
        response = await get_current_user.execute(
            GetCurrentUserRequest(authorization=f"Bearer {user_id}")
        )

        assert response.user_id == str(user_id)
        assert response.profile is None
        assert response.capabilities == []

    @pytest.mark.asyncio
    async def test_moderator_capabilities(self, unit_env):
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        profile_repo = await unit_env.get(ProfileRepository)

        mod = await make_profile(profile_repo, "mod", is_moderator=True)

        response = await get_current_user.execute(
            GetCurrentUserRequest(authorization=f"Bearer {mod.id}")
        )

        assert response.profile.username == "mod"
        assert response.capabilities == [Capability.MODERATE_CONTENT]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "authorization", [None, "", "Bearer", "Basic abc", "Bearer not-a-uuid"]
    )
    async def test_bad_headers_are_rejected(self, unit_env, authorization):
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(AuthenticationError):
            await get_current_user.execute(
                GetCurrentUserRequest(authorization=authorization)
            )
