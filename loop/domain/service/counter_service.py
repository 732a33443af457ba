"""Interaction counter domain service.

Counters live in `loop_stats` and are only ever changed through this
service, always with atomic SQL-level updates.
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from loop.domain.error import ConflictError, NotFoundError, ValidationError
from loop.domain.model.interaction import Interaction, ToggleResult, ViewerState
from loop.domain.model.stats import LoopStats
from loop.domain.repository import InteractionRepository, LoopStatsRepository
from loop.domain.value import (
    CounterName,
    InteractionId,
    InteractionType,
    LoopId,
    ToggleAction,
    UserId,
)

from .base import Service

# Insert and delete can both miss when another request flips the same
# interaction in between. Give up after this many rounds.
MAX_TOGGLE_ATTEMPTS = 3


class CounterService(Service):
    """Domain service for interaction writes and their counters."""

    def __init__(
        self,
        stats_repository: LoopStatsRepository,
        interaction_repository: InteractionRepository,
    ) -> None:
        """Initialize counter service.

        Args:
            stats_repository: Loop stats repository
            interaction_repository: Interaction repository
        """
        self.stats_repository = stats_repository
        self.interaction_repository = interaction_repository

    async def initialize(self, loop_id: LoopId) -> LoopStats:
        """Create the zero counters of a new loop."""
        with logfire.span("counter_service.initialize", loop_id=str(loop_id)):
            return await self.stats_repository.create(loop_id)

    async def adjust(self, loop_id: LoopId, counter: CounterName, delta: int) -> int:
        """Move a counter by one.

        Args:
            loop_id: Loop ID
            counter: Counter to change
            delta: +1 or -1

        Returns:
            The counter value after the change (never below zero)

        Raises:
            ValueError: If delta is not +1 or -1
            NotFoundError: If the loop has no stats row
        """
        if delta not in (1, -1):
            raise ValueError(f"Counter delta must be +1 or -1, got {delta}")
        return await self.adjust_by(loop_id, counter, delta)

    async def adjust_by(self, loop_id: LoopId, counter: CounterName, delta: int) -> int:
        """Move a counter by an arbitrary amount.

        Used when one delete removes several counted rows at once.

        Raises:
            NotFoundError: If the loop has no stats row
        """
        with logfire.span(
            "counter_service.adjust",
            loop_id=str(loop_id),
            counter=counter.value,
            delta=delta,
        ):
            new_count = await self.stats_repository.adjust(loop_id, counter, delta)
            if new_count is None:
                logfire.warn("Stats row missing", loop_id=str(loop_id))
                raise NotFoundError("Loop", str(loop_id))
            return new_count

    async def toggle(
        self, user_id: UserId, loop_id: LoopId, interaction_type: InteractionType
    ) -> ToggleResult:
        """Flip a like or save.

        Whichever of insert or delete takes effect decides the counter
        direction, so concurrent toggles never double count.

        Args:
            user_id: Acting user
            loop_id: Target loop
            interaction_type: like or save

        Returns:
            Whether the interaction was added or removed, and the new count

        Raises:
            ValidationError: If the type is not toggleable
            ConflictError: If the interaction kept changing underneath us
        """
        if not interaction_type.is_toggleable:
            raise ValidationError(f"{interaction_type.value} cannot be toggled")

        with logfire.span(
            "counter_service.toggle",
            user_id=str(user_id),
            loop_id=str(loop_id),
            interaction_type=interaction_type.value,
        ):
            for attempt in range(1, MAX_TOGGLE_ATTEMPTS + 1):
                if await self._insert(user_id, loop_id, interaction_type):
                    count = await self.adjust(loop_id, interaction_type.counter, 1)
                    return ToggleResult(action=ToggleAction.ADDED, new_count=count)

                if await self.interaction_repository.delete(
                    user_id, loop_id, interaction_type
                ):
                    count = await self.adjust(loop_id, interaction_type.counter, -1)
                    return ToggleResult(action=ToggleAction.REMOVED, new_count=count)

                logfire.warn(
                    "Toggle lost a race, retrying",
                    loop_id=str(loop_id),
                    attempt=attempt,
                )

            raise ConflictError("Interaction changed concurrently, please retry")

    async def set_state(
        self,
        user_id: UserId,
        loop_id: LoopId,
        interaction_type: InteractionType,
        active: bool,
    ) -> ToggleResult:
        """Explicitly add or remove an interaction.

        Repeating the current state is a no-op that reports the current count.
        """
        with logfire.span(
            "counter_service.set_state",
            user_id=str(user_id),
            loop_id=str(loop_id),
            interaction_type=interaction_type.value,
            active=active,
        ):
            counter = interaction_type.counter
            if active:
                if await self._insert(user_id, loop_id, interaction_type):
                    count = await self.adjust(loop_id, counter, 1)
                    return ToggleResult(action=ToggleAction.ADDED, new_count=count)
            elif await self.interaction_repository.delete(
                user_id, loop_id, interaction_type
            ):
                count = await self.adjust(loop_id, counter, -1)
                return ToggleResult(action=ToggleAction.REMOVED, new_count=count)

            stats = await self.get_stats(loop_id)
            return ToggleResult(
                action=ToggleAction.UNCHANGED, new_count=stats.get(counter)
            )

    async def record(
        self, user_id: UserId, loop_id: LoopId, interaction_type: InteractionType
    ) -> ToggleResult:
        """Record a view or share. Each user counts once per loop.

        Raises:
            ValidationError: If the type is toggleable (like/save)
        """
        if interaction_type.is_toggleable:
            raise ValidationError(f"{interaction_type.value} must be toggled")
        return await self.set_state(user_id, loop_id, interaction_type, active=True)

    async def get_stats(self, loop_id: LoopId) -> LoopStats:
        """Get the counters of one loop.

        Raises:
            NotFoundError: If the loop has no stats row
        """
        stats = await self.stats_repository.find_by_loop(loop_id)
        if stats is None:
            raise NotFoundError("Loop", str(loop_id))
        return stats

    async def get_stats_many(
        self, loop_ids: Sequence[LoopId]
    ) -> dict[LoopId, LoopStats]:
        """Get counters for several loops with one query.

        Loops without a stats row map to zero counters.
        """
        if not loop_ids:
            return {}

        rows = await self.stats_repository.find_by_loops(loop_ids)
        by_loop = {stats.loop_id: stats for stats in rows}
        return {
            loop_id: by_loop.get(loop_id) or LoopStats.empty(loop_id)
            for loop_id in loop_ids
        }

    async def viewer_state(
        self, user_id: Optional[UserId], loop_ids: Sequence[LoopId]
    ) -> dict[LoopId, ViewerState]:
        """Check what a viewer has done to several loops.

        Args:
            user_id: Viewer (None for anonymous)
            loop_ids: Loops to check

        Returns:
            Dictionary mapping each loop ID to the viewer's state
        """
        if not loop_ids:
            return {}
        if user_id is None:
            return {loop_id: ViewerState() for loop_id in loop_ids}

        # Batch query to fetch all interactions at once (avoid N+1)
        interactions = await self.interaction_repository.find_by_user_and_loops(
            user_id, loop_ids
        )

        types_by_loop: dict[LoopId, set[InteractionType]] = {}
        for interaction in interactions:
            types_by_loop.setdefault(interaction.loop_id, set()).add(
                interaction.interaction_type
            )

        return {
            loop_id: ViewerState.from_types(types_by_loop.get(loop_id, set()))
            for loop_id in loop_ids
        }

    async def _insert(
        self, user_id: UserId, loop_id: LoopId, interaction_type: InteractionType
    ) -> bool:
        interaction = Interaction(
            id=InteractionId(uuid4()),
            user_id=user_id,
            loop_id=loop_id,
            interaction_type=interaction_type,
            created_at=datetime.now(),
        )
        return await self.interaction_repository.insert_if_absent(interaction)
