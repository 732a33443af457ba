"""Unit tests for FollowService."""

import pytest

from loop.domain.error import ConflictError, ValidationError
from loop.domain.repository import NotificationRepository, ProfileRepository
from loop.domain.service import FollowService
from loop.domain.value import NotificationType
from tests.conftest import make_profile, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFollowService:
    """Tests for FollowService."""

    @pytest.mark.asyncio
    async def test_follow_notifies_followed_user(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        notification_repo = await unit_env.get(NotificationRepository)
        profile_repo = await unit_env.get(ProfileRepository)

        fan = await make_profile(profile_repo, "fan")
        star = new_user_id()

        await follow_service.follow(fan.id, star)

        assert await follow_service.is_following(fan.id, star) is True
        assert await follow_service.is_following(star, fan.id) is False
        notifications = await notification_repo.find_by_recipient(star)
        assert notifications[0].type == NotificationType.FOLLOW
        assert notifications[0].title == "fan started following you"

    @pytest.mark.asyncio
    async def test_unknown_follower_gets_fallback_name(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        notification_repo = await unit_env.get(NotificationRepository)

        star = new_user_id()
        await follow_service.follow(new_user_id(), star)

        notifications = await notification_repo.find_by_recipient(star)
        assert notifications[0].title == "Someone started following you"

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, unit_env):
        follow_service = await unit_env.get(FollowService)

        user_id = new_user_id()
        with pytest.raises(ValidationError):
            await follow_service.follow(user_id, user_id)

    @pytest.mark.asyncio
    async def test_duplicate_follow_raises_conflict(self, unit_env):
        follow_service = await unit_env.get(FollowService)

        fan, star = new_user_id(), new_user_id()
        await follow_service.follow(fan, star)

        with pytest.raises(ConflictError):
            await follow_service.follow(fan, star)

    @pytest.mark.asyncio
    async def test_unfollow(self, unit_env):
        follow_service = await unit_env.get(FollowService)

        fan, star = new_user_id(), new_user_id()
        await follow_service.follow(fan, star)

        assert await follow_service.unfollow(fan, star) is True
        assert await follow_service.unfollow(fan, star) is False
        assert await follow_service.follower_ids(star) == []

    @pytest.mark.asyncio
    async def test_followers_and_following_lists(self, unit_env):
        follow_service = await unit_env.get(FollowService)

        star = new_user_id()
        fans = [new_user_id() for _ in range(3)]
        for fan in fans:
            await follow_service.follow(fan, star)

        followers = await follow_service.followers(star)
        following = await follow_service.following(fans[0])

        assert {f.follower_id for f in followers} == set(fans)
        assert [f.following_id for f in following] == [star]
