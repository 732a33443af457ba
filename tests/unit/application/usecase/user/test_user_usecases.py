"""Unit tests for the user use cases."""

import pytest

from loop.application.usecase.user import (
    FollowUserRequest,
    FollowUserUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from loop.domain.error import ConflictError, NotFoundError
from loop.domain.repository import ProfileRepository
from tests.conftest import make_profile, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFollowUserUseCase:
    """Tests for following users."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        follow_user = await unit_env.get(FollowUserUseCase)

        fan, star = str(new_user_id()), str(new_user_id())

        followed = await follow_user.execute(
            FollowUserRequest(follower_id=fan, target_user_id=star)
        )
        unfollowed = await follow_user.execute(
            FollowUserRequest(follower_id=fan, target_user_id=star, action="unfollow")
        )
        again = await follow_user.execute(
            FollowUserRequest(follower_id=fan, target_user_id=star, action="unfollow")
        )

        assert followed.is_following is True
        assert unfollowed.is_following is False
        assert unfollowed.changed is True
        assert again.changed is False

    @pytest.mark.asyncio
    async def test_double_follow_conflicts(self, unit_env):
        follow_user = await unit_env.get(FollowUserUseCase)

        request = FollowUserRequest(
            follower_id=str(new_user_id()), target_user_id=str(new_user_id())
        )
        await follow_user.execute(request)

        with pytest.raises(ConflictError):
            await follow_user.execute(request)

    @pytest.mark.asyncio
    async def test_follow_lists_include_profiles(self, unit_env):
        follow_user = await unit_env.get(FollowUserUseCase)
        list_followers = await unit_env.get(ListFollowersUseCase)
        list_following = await unit_env.get(ListFollowingUseCase)
        profile_repo = await unit_env.get(ProfileRepository)

        fan = await make_profile(profile_repo, "fan")
        star = await make_profile(profile_repo, "star")
        await follow_user.execute(
            FollowUserRequest(follower_id=str(fan.id), target_user_id=str(star.id))
        )

        followers = await list_followers.execute(ListFollowsRequest(user_id=str(star.id)))
        following = await list_following.execute(ListFollowsRequest(user_id=str(fan.id)))

        assert [f.user_id for f in followers.users] == [str(fan.id)]
        assert followers.users[0].profile.username == "fan"
        assert [f.user_id for f in following.users] == [str(star.id)]


class TestProfileUseCases:
    """Tests for reading and updating profiles."""

    @pytest.mark.asyncio
    async def test_update_then_get_profile(self, unit_env):
        update_profile = await unit_env.get(UpdateProfileUseCase)
        get_profile = await unit_env.get(GetProfileUseCase)
        follow_user = await unit_env.get(FollowUserUseCase)

        user_id, viewer = str(new_user_id()), str(new_user_id())
        await update_profile.execute(
            UpdateProfileRequest(
                user_id=user_id, username="beatsmith", display_name="Beat Smith"
            )
        )
        await follow_user.execute(
            FollowUserRequest(follower_id=viewer, target_user_id=user_id)
        )

        response = await get_profile.execute(
            GetProfileRequest(user_id=user_id, viewer_id=viewer)
        )

        assert response.profile.username == "beatsmith"
        assert response.profile.display_name == "Beat Smith"
        assert response.is_following is True

    @pytest.mark.asyncio
    async def test_get_missing_profile(self, unit_env):
        get_profile = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotFoundError):
            await get_profile.execute(GetProfileRequest(user_id=str(new_user_id())))
