"""Unit tests for StreamService."""

import pytest

from loop.domain.error import ForbiddenError, NotFoundError, ValidationError
from loop.domain.repository import NotificationRepository, ProfileRepository
from loop.domain.service import FollowService, RealtimeTransport, StreamService
from loop.domain.value import NotificationType, StreamId
from tests.conftest import make_profile, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestStreamService:
    """Tests for StreamService."""

    @pytest.mark.asyncio
    async def test_start_notifies_all_followers_in_one_batch(self, unit_env):
        stream_service = await unit_env.get(StreamService)
        follow_service = await unit_env.get(FollowService)
        notification_repo = await unit_env.get(NotificationRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        realtime = await unit_env.get(RealtimeTransport)

        dj = await make_profile(profile_repo, "dj_loop", display_name="DJ Loop")
        fans = [new_user_id() for _ in range(4)]
        for fan in fans:
            await follow_service.follow(fan, dj.id)

        stream = await stream_service.create(dj.id, "Friday night set", "music")
        writes_before = notification_repo.write_calls

        notified = await stream_service.start(stream.id, dj.id)

        assert notified == 4
        assert notification_repo.write_calls == writes_before + 1
        for fan in fans:
            notes = await notification_repo.find_by_recipient(fan)
            live = [n for n in notes if n.type == NotificationType.LIVE_STREAM_STARTED]
            assert len(live) == 1
            assert live[0].title == "DJ Loop is now live!"
            assert live[0].data["stream_id"] == str(stream.id)

        assert realtime.events("live_notifications") == ["live_stream_started"]
        assert (await stream_service.get(stream.id)).is_live is True

    @pytest.mark.asyncio
    async def test_start_without_followers(self, unit_env):
        stream_service = await unit_env.get(StreamService)

        streamer = new_user_id()
        stream = await stream_service.create(streamer, "Quiet practice")

        assert await stream_service.start(stream.id, streamer) == 0

    @pytest.mark.asyncio
    async def test_start_twice_is_rejected(self, unit_env):
        stream_service = await unit_env.get(StreamService)

        streamer = new_user_id()
        stream = await stream_service.create(streamer, "Set")
        await stream_service.start(stream.id, streamer)

        with pytest.raises(ValidationError):
            await stream_service.start(stream.id, streamer)

    @pytest.mark.asyncio
    async def test_only_streamer_can_start_or_end(self, unit_env):
        stream_service = await unit_env.get(StreamService)

        stream = await stream_service.create(new_user_id(), "Set")

        with pytest.raises(ForbiddenError):
            await stream_service.start(stream.id, new_user_id())
        with pytest.raises(ForbiddenError):
            await stream_service.end(stream.id, new_user_id())

    @pytest.mark.asyncio
    async def test_end_stream(self, unit_env):
        stream_service = await unit_env.get(StreamService)
        realtime = await unit_env.get(RealtimeTransport)

        streamer = new_user_id()
        stream = await stream_service.create(streamer, "Set")
        await stream_service.start(stream.id, streamer)

        ended = await stream_service.end(stream.id, streamer)

        assert ended.is_live is False
        assert ended.ended_at is not None
        assert realtime.events("live_notifications")[-1] == "live_stream_ended"

    @pytest.mark.asyncio
    async def test_unknown_stream_raises_not_found(self, unit_env):
        stream_service = await unit_env.get(StreamService)

        with pytest.raises(NotFoundError):
            await stream_service.start(StreamId(new_user_id()), new_user_id())
