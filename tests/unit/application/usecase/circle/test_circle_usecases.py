"""Unit tests for the circle use cases."""

import pytest

from loop.application.usecase.circle import (
    CreateCircleRequest,
    CreateCircleUseCase,
    GetCircleRequest,
    GetCircleUseCase,
    JoinCircleRequest,
    JoinCircleUseCase,
)
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCircleUseCases:
    """Tests for creating, joining and reading circles."""

    @pytest.mark.asyncio
    async def test_create_join_get(self, unit_env):
        create_circle = await unit_env.get(CreateCircleUseCase)
        join_circle = await unit_env.get(JoinCircleUseCase)
        get_circle = await unit_env.get(GetCircleUseCase)

        owner, member = str(new_user_id()), str(new_user_id())
        created = await create_circle.execute(
            CreateCircleRequest(owner_id=owner, name="Lo-fi", description="chill")
        )

        joined = await join_circle.execute(
            JoinCircleRequest(circle_id=created.circle.id, user_id=member)
        )
        as_member = await get_circle.execute(
            GetCircleRequest(circle_id=created.circle.id, viewer_id=member)
        )
        as_stranger = await get_circle.execute(
            GetCircleRequest(circle_id=created.circle.id, viewer_id=str(new_user_id()))
        )

        assert created.circle.member_count == 1
        assert joined.joined is True
        assert as_member.is_member is True
        assert as_member.circle.member_count == 2
        assert as_stranger.is_member is False
