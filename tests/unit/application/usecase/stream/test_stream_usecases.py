"""Unit tests for the live stream use cases."""

import pytest

from loop.application.usecase.stream import (
    CreateStreamRequest,
    CreateStreamUseCase,
    StreamNotificationRequest,
    StreamNotificationUseCase,
)
from loop.domain.service import FollowService
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestStreamUseCases:
    """Tests for creating, starting and ending streams."""

    @pytest.mark.asyncio
    async def test_start_and_end(self, unit_env):
        create_stream = await unit_env.get(CreateStreamUseCase)
        stream_notification = await unit_env.get(StreamNotificationUseCase)
        follow_service = await unit_env.get(FollowService)

        streamer = new_user_id()
        for _ in range(2):
            await follow_service.follow(new_user_id(), streamer)

        created = await create_stream.execute(
            CreateStreamRequest(streamer_id=str(streamer), title="Late set")
        )
        assert created.stream.is_live is False

        started = await stream_notification.execute(
            StreamNotificationRequest(
                requester_id=str(streamer),
                stream_id=created.stream.id,
                action="start",
            )
        )
        ended = await stream_notification.execute(
            StreamNotificationRequest(
                requester_id=str(streamer),
                stream_id=created.stream.id,
                action="end",
            )
        )

        assert started.stream.is_live is True
        assert started.notified_followers == 2
        assert ended.stream.is_live is False
        assert ended.notified_followers == 0
