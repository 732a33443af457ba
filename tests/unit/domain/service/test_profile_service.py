"""Unit tests for ProfileService."""

import pytest

from loop.domain.error import ConflictError, NotFoundError
from loop.domain.repository import ProfileRepository
from loop.domain.service import ProfileService
from loop.domain.value import Username
from tests.conftest import make_profile, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProfileService:
    """Tests for ProfileService."""

    @pytest.mark.asyncio
    async def test_upsert_creates_then_updates(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        user_id = new_user_id()
        created = await profile_service.upsert(user_id, Username("looper"), "Looper")
        updated = await profile_service.upsert(
            user_id, Username("looper2"), "Looper", bio="Makes loops"
        )

        assert created.username.root == "looper"
        assert updated.username.root == "looper2"
        assert updated.bio == "Makes loops"
        assert (await profile_service.get(user_id)).username.root == "looper2"

    @pytest.mark.asyncio
    async def test_upsert_keeps_capability_flags(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        mod = await make_profile(profile_repo, "mod", is_moderator=True)

        updated = await profile_service.upsert(mod.id, Username("mod"), "Mod")

        assert updated.is_moderator is True

    @pytest.mark.asyncio
    async def test_taken_username_raises_conflict(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        await make_profile(profile_repo, "taken")

        with pytest.raises(ConflictError):
            await profile_service.upsert(new_user_id(), Username("taken"))

    @pytest.mark.asyncio
    async def test_missing_profile_raises_not_found(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get(new_user_id())

    @pytest.mark.asyncio
    async def test_get_many_batches(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        a = await make_profile(profile_repo, "aaa")
        b = await make_profile(profile_repo, "bbb")

        found = await profile_service.get_many([a.id, b.id, new_user_id()])

        assert set(found) == {a.id, b.id}
