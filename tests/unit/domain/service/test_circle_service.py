"""Unit tests for CircleService."""

import pytest

from loop.domain.error import NotFoundError
from loop.domain.service import CircleService
from loop.domain.value import CircleId
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCircleService:
    """Tests for CircleService."""

    @pytest.mark.asyncio
    async def test_owner_is_first_member(self, unit_env):
        circle_service = await unit_env.get(CircleService)

        owner = new_user_id()
        circle = await circle_service.create(owner, "Beatmakers", "Share your beats")

        assert await circle_service.is_member(circle.id, owner)
        assert (await circle_service.get(circle.id)).member_count == 1

    @pytest.mark.asyncio
    async def test_join_is_idempotent(self, unit_env):
        circle_service = await unit_env.get(CircleService)

        circle = await circle_service.create(new_user_id(), "Beatmakers")
        member = new_user_id()

        assert await circle_service.join(circle.id, member) is True
        assert await circle_service.join(circle.id, member) is False
        assert (await circle_service.get(circle.id)).member_count == 2

    @pytest.mark.asyncio
    async def test_join_missing_circle_raises_not_found(self, unit_env):
        circle_service = await unit_env.get(CircleService)

        with pytest.raises(NotFoundError):
            await circle_service.join(CircleId(new_user_id()), new_user_id())
