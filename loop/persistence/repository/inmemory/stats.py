"""In-memory loop stats repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from loop.domain.model import LoopStats
from loop.domain.repository import LoopStatsRepository
from loop.domain.value import CounterName, LoopId

from .database import InMemoryDatabase


class InMemoryLoopStatsRepository(LoopStatsRepository):
    """In-memory implementation of LoopStatsRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def create(self, loop_id: LoopId) -> LoopStats:
        """Create zero counters.

        Raises:
            IntegrityError: If the row exists (duplicate)
        """
        if loop_id in self.db.stats:
            raise IntegrityError("Duplicate stats row", None, Exception())
        stats = LoopStats.empty(loop_id)
        self.db.stats[loop_id] = stats
        return stats

    async def find_by_loop(self, loop_id: LoopId) -> Optional[LoopStats]:
        return self.db.stats.get(loop_id)

    async def find_by_loops(self, loop_ids: Sequence[LoopId]) -> list[LoopStats]:
        return [self.db.stats[i] for i in loop_ids if i in self.db.stats]

    async def adjust(
        self, loop_id: LoopId, counter: CounterName, delta: int
    ) -> Optional[int]:
        stats = self.db.stats.get(loop_id)
        if stats is None:
            return None

        # No await between read and write, so this is atomic under asyncio
        new_value = max(stats.get(counter) + delta, 0)
        self.db.stats[loop_id] = stats.model_copy(update={counter.value: new_value})
        return new_value
