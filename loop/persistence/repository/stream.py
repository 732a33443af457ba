"""PostgreSQL implementation of LiveStream repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import LiveStream
from loop.domain.repository import LiveStreamRepository
from loop.domain.value import StreamId
from loop.persistence.mappers import row_to_stream
from loop.persistence.tables import live_streams_table


class PostgresLiveStreamRepository(LiveStreamRepository):
    """PostgreSQL implementation of LiveStreamRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, stream_id: StreamId) -> Optional[LiveStream]:
        """Find a stream by ID."""
        stmt = select(live_streams_table).where(live_streams_table.c.id == stream_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_stream(row._asdict()) if row else None

    async def save(self, stream: LiveStream) -> LiveStream:
        """Insert or update a stream."""
        values = stream.model_dump()
        stmt = insert(live_streams_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[live_streams_table.c.id],
            set_={
                "title": stmt.excluded.title,
                "category": stmt.excluded.category,
                "is_live": stmt.excluded.is_live,
                "started_at": stmt.excluded.started_at,
                "ended_at": stmt.excluded.ended_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return stream
