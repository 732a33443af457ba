"""Unit tests for CapabilityService."""

import pytest

from loop.config import AuthSettings
from loop.domain.error import ForbiddenError, NotFoundError
from loop.domain.repository import ProfileRepository
from loop.domain.service import CapabilityService
from loop.domain.value import Capability
from tests.conftest import make_profile, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCapabilityService:
    """Tests for CapabilityService."""

    @pytest.mark.asyncio
    async def test_user_without_profile_has_no_capabilities(self, unit_env):
        capability_service = await unit_env.get(CapabilityService)

        user_id = new_user_id()

        assert not await capability_service.has_capability(
            user_id, Capability.MODERATE_CONTENT
        )
        assert not await capability_service.has_capability(
            user_id, Capability.MANAGE_USERS
        )

    @pytest.mark.asyncio
    async def test_moderator_can_moderate_but_not_manage(self, unit_env):
        capability_service = await unit_env.get(CapabilityService)
        profile_repo = await unit_env.get(ProfileRepository)

        mod = await make_profile(profile_repo, "mod", is_moderator=True)

        assert await capability_service.has_capability(
            mod.id, Capability.MODERATE_CONTENT
        )
        assert not await capability_service.has_capability(
            mod.id, Capability.MANAGE_USERS
        )

    @pytest.mark.asyncio
    async def test_admin_holds_everything(self, unit_env):
        capability_service = await unit_env.get(CapabilityService)
        profile_repo = await unit_env.get(ProfileRepository)

        admin = await make_profile(profile_repo, "admin", is_admin=True)

        for capability in Capability:
            assert await capability_service.has_capability(admin.id, capability)

    @pytest.mark.asyncio
    async def test_configured_admin_ids_bypass_profiles(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)

        admin_id = new_user_id()
        capability_service = CapabilityService(
            profile_repo, AuthSettings(admin_user_ids=[admin_id])
        )

        assert await capability_service.has_capability(
            admin_id, Capability.MANAGE_USERS
        )

    @pytest.mark.asyncio
    async def test_set_moderator_requires_manage_users(self, unit_env):
        capability_service = await unit_env.get(CapabilityService)
        profile_repo = await unit_env.get(ProfileRepository)

        mod = await make_profile(profile_repo, "mod", is_moderator=True)
        target = await make_profile(profile_repo, "target")

        with pytest.raises(ForbiddenError):
            await capability_service.set_moderator(mod.id, target.id, True)

    @pytest.mark.asyncio
    async def test_admin_grants_and_revokes_moderator(self, unit_env):
        capability_service = await unit_env.get(CapabilityService)
        profile_repo = await unit_env.get(ProfileRepository)

        admin = await make_profile(profile_repo, "admin", is_admin=True)
        target = await make_profile(profile_repo, "target")

        granted = await capability_service.set_moderator(admin.id, target.id, True)
        assert granted.is_moderator is True
        assert await capability_service.has_capability(
            target.id, Capability.MODERATE_CONTENT
        )

        revoked = await capability_service.set_moderator(admin.id, target.id, False)
        assert revoked.is_moderator is False

    @pytest.mark.asyncio
    async def test_set_moderator_on_missing_profile(self, unit_env):
        capability_service = await unit_env.get(CapabilityService)
        profile_repo = await unit_env.get(ProfileRepository)

        admin = await make_profile(profile_repo, "admin", is_admin=True)

        with pytest.raises(NotFoundError):
            await capability_service.set_moderator(admin.id, new_user_id(), True)
