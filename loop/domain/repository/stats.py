"""Loop stats repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from loop.domain.model.stats import LoopStats
from loop.domain.value import CounterName, LoopId


class LoopStatsRepository(ABC):
    """Repository for the denormalized per-loop counters."""

    @abstractmethod
    async def create(self, loop_id: LoopId) -> LoopStats:
        """Create the zero-initialised stats row for a new loop.

        Args:
            loop_id: The loop ID

        Returns:
            The created stats
        """
        pass

    @abstractmethod
    async def find_by_loop(self, loop_id: LoopId) -> Optional[LoopStats]:
        """Find the stats of one loop.

        Args:
            loop_id: The loop ID

        Returns:
            Stats if the row exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_loops(self, loop_ids: Sequence[LoopId]) -> List[LoopStats]:
        """Find stats for several loops (batch query).

        Args:
            loop_ids: Loop IDs to fetch

        Returns:
            Stats rows that exist
        """
        pass

    @abstractmethod
    async def adjust(
        self, loop_id: LoopId, counter: CounterName, delta: int
    ) -> Optional[int]:
        """Atomically add delta to a counter, clamping at zero.

        Uses a single SQL-level update so concurrent adjustments never
        lose increments.

        Args:
            loop_id: The loop ID
            counter: Counter to change
            delta: Amount to add (negative to subtract)

        Returns:
            The new counter value, or None if the stats row does not exist
        """
        pass
