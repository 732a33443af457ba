"""PostgreSQL implementation of LoopStats repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import LoopStats
from loop.domain.repository import LoopStatsRepository
from loop.domain.value import CounterName, LoopId
from loop.persistence.mappers import row_to_stats
from loop.persistence.tables import loop_stats_table


class PostgresLoopStatsRepository(LoopStatsRepository):
    """PostgreSQL implementation of LoopStatsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, loop_id: LoopId) -> LoopStats:
        """Create the zero-initialised stats row."""
        await self.session.execute(insert(loop_stats_table).values(loop_id=loop_id))
        await self.session.flush()
        return LoopStats.empty(loop_id)

    async def find_by_loop(self, loop_id: LoopId) -> Optional[LoopStats]:
        """Find the stats of one loop."""
        stmt = select(loop_stats_table).where(loop_stats_table.c.loop_id == loop_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_stats(row._asdict()) if row else None

    async def find_by_loops(self, loop_ids: Sequence[LoopId]) -> List[LoopStats]:
        """Find stats for several loops (batch query)."""
        if not loop_ids:
            return []

        stmt = select(loop_stats_table).where(loop_stats_table.c.loop_id.in_(loop_ids))
        result = await self.session.execute(stmt)
        return [row_to_stats(row._asdict()) for row in result.fetchall()]

    async def adjust(
        self, loop_id: LoopId, counter: CounterName, delta: int
    ) -> Optional[int]:
        """Atomically add delta to a counter, clamping at zero."""
        column = loop_stats_table.c[counter.value]
        stmt = (
            update(loop_stats_table)
            .where(loop_stats_table.c.loop_id == loop_id)
            .values({counter.value: func.greatest(column + delta, 0)})
            .returning(column)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row[0] if row else None
