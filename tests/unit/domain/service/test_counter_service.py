"""Unit tests for CounterService."""

import asyncio

import pytest

from loop.domain.error import ConflictError, ValidationError
from loop.domain.model import Interaction
from loop.domain.repository import InteractionRepository, LoopStatsRepository
from loop.domain.service import CounterService, LoopService
from loop.domain.value import CounterName, InteractionType, ToggleAction
from loop.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryInteractionRepository,
)
from tests.conftest import new_user_id, text
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class YieldingInteractionRepository(InMemoryInteractionRepository):
    """Gives up the event loop before every write so toggles interleave."""

    async def insert_if_absent(self, interaction: Interaction) -> bool:
        await asyncio.sleep(0)
        return await super().insert_if_absent(interaction)

    async def delete(self, user_id, loop_id, interaction_type) -> bool:
        await asyncio.sleep(0)
        return await super().delete(user_id, loop_id, interaction_type)


class TestToggle:
    """Tests for like/save toggles."""

    @pytest.mark.asyncio
    async def test_sequential_toggles_alternate(self, unit_env):
        """Like, unlike, like again: counter follows the toggles."""
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())
        user_id = new_user_id()

        first = await counter_service.toggle(user_id, loop.id, InteractionType.LIKE)
        second = await counter_service.toggle(user_id, loop.id, InteractionType.LIKE)
        third = await counter_service.toggle(user_id, loop.id, InteractionType.LIKE)

        assert (first.action, first.new_count) == (ToggleAction.ADDED, 1)
        assert (second.action, second.new_count) == (ToggleAction.REMOVED, 0)
        assert (third.action, third.new_count) == (ToggleAction.ADDED, 1)

    @pytest.mark.asyncio
    async def test_counts_accumulate_across_users(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())
        for _ in range(3):
            await counter_service.toggle(new_user_id(), loop.id, InteractionType.SAVE)

        stats = await counter_service.get_stats(loop.id)
        assert stats.saves == 3
        assert stats.likes == 0

    @pytest.mark.asyncio
    async def test_concurrent_toggles_keep_counter_consistent(self, unit_env):
        """Racing toggles by one user never double count."""
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)
        interaction_repo = await unit_env.get(InteractionRepository)

        loop = await loop_service.create_root(new_user_id(), text())
        user_id = new_user_id()

        results = await asyncio.gather(
            *[
                counter_service.toggle(user_id, loop.id, InteractionType.LIKE)
                for _ in range(7)
            ]
        )

        added = sum(1 for r in results if r.action == ToggleAction.ADDED)
        removed = sum(1 for r in results if r.action == ToggleAction.REMOVED)
        assert added - removed in (0, 1)

        stats = await counter_service.get_stats(loop.id)
        rows = await interaction_repo.find_by_user_and_loops(user_id, [loop.id])
        assert stats.likes == len(rows) == added - removed

    @pytest.mark.asyncio
    async def test_concurrent_likes_from_many_users(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())

        await asyncio.gather(
            *[
                counter_service.toggle(new_user_id(), loop.id, InteractionType.LIKE)
                for _ in range(20)
            ]
        )

        stats = await counter_service.get_stats(loop.id)
        assert stats.likes == 20

    @pytest.mark.asyncio
    async def test_interleaved_toggles_stay_consistent(self, unit_env):
        """Toggles that interleave at every write keep rows and counter equal.

        A toggle that keeps losing the race gives up with ConflictError
        instead of guessing.
        """
        loop_service = await unit_env.get(LoopService)
        db = await unit_env.get(InMemoryDatabase)
        stats_repo = await unit_env.get(LoopStatsRepository)
        interaction_repo = YieldingInteractionRepository(db)
        counter_service = CounterService(stats_repo, interaction_repo)

        loop = await loop_service.create_root(new_user_id(), text())
        user_id = new_user_id()

        results = await asyncio.gather(
            *[
                counter_service.toggle(user_id, loop.id, InteractionType.LIKE)
                for _ in range(7)
            ],
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, Exception)]
        assert all(isinstance(f, ConflictError) for f in failures)

        done = [r for r in results if not isinstance(r, Exception)]
        added = sum(1 for r in done if r.action == ToggleAction.ADDED)
        removed = sum(1 for r in done if r.action == ToggleAction.REMOVED)

        stats = await counter_service.get_stats(loop.id)
        rows = await interaction_repo.find_by_user_and_loops(user_id, [loop.id])
        assert stats.likes == len(rows) == added - removed

    @pytest.mark.asyncio
    async def test_view_cannot_be_toggled(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())

        with pytest.raises(ValidationError):
            await counter_service.toggle(new_user_id(), loop.id, InteractionType.VIEW)


class TestSetStateAndRecord:
    """Tests for explicit add/remove and once-only interactions."""

    @pytest.mark.asyncio
    async def test_set_state_is_idempotent(self, unit_env):
        """Adding twice counts once, removing twice never goes negative."""
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())
        user_id = new_user_id()

        added = await counter_service.set_state(
            user_id, loop.id, InteractionType.LIKE, active=True
        )
        again = await counter_service.set_state(
            user_id, loop.id, InteractionType.LIKE, active=True
        )
        assert added.action == ToggleAction.ADDED
        assert again.action == ToggleAction.UNCHANGED
        assert again.new_count == 1

        await counter_service.set_state(
            user_id, loop.id, InteractionType.LIKE, active=False
        )
        gone = await counter_service.set_state(
            user_id, loop.id, InteractionType.LIKE, active=False
        )
        assert gone.action == ToggleAction.UNCHANGED
        assert gone.new_count == 0

    @pytest.mark.asyncio
    async def test_view_is_counted_once_per_user(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())
        viewer = new_user_id()

        await counter_service.record(viewer, loop.id, InteractionType.VIEW)
        await counter_service.record(viewer, loop.id, InteractionType.VIEW)
        await counter_service.record(new_user_id(), loop.id, InteractionType.VIEW)

        stats = await counter_service.get_stats(loop.id)
        assert stats.views == 2

    @pytest.mark.asyncio
    async def test_record_rejects_toggleable_types(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())

        with pytest.raises(ValidationError):
            await counter_service.record(new_user_id(), loop.id, InteractionType.LIKE)


class TestAdjust:
    """Tests for raw counter moves."""

    @pytest.mark.asyncio
    async def test_counter_never_goes_below_zero(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())

        value = await counter_service.adjust(loop.id, CounterName.COMMENTS, -1)

        assert value == 0

    @pytest.mark.asyncio
    async def test_adjust_rejects_large_deltas(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())

        with pytest.raises(ValueError):
            await counter_service.adjust(loop.id, CounterName.LIKES, 2)

    @pytest.mark.asyncio
    async def test_viewer_state_reflects_interactions(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())
        viewer = new_user_id()
        await counter_service.toggle(viewer, loop.id, InteractionType.SAVE)

        states = await counter_service.viewer_state(viewer, [loop.id])
        anonymous = await counter_service.viewer_state(None, [loop.id])

        assert states[loop.id].is_saved is True
        assert states[loop.id].is_liked is False
        assert anonymous[loop.id].is_saved is False
