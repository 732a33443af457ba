"""PostgreSQL implementation of Outbox repository."""

from datetime import datetime
from typing import List

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import OutboxMessage
from loop.domain.repository import OutboxRepository
from loop.domain.value import OutboxMessageId, OutboxStatus
from loop.persistence.mappers import row_to_outbox_message
from loop.persistence.tables import outbox_table


class PostgresOutboxRepository(OutboxRepository):
    """PostgreSQL implementation of OutboxRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, message: OutboxMessage) -> OutboxMessage:
        """Insert an outbox message."""
        values = message.model_dump()
        values["status"] = message.status.value
        await self.session.execute(insert(outbox_table).values(**values))
        await self.session.flush()
        return message

    async def find_retryable(self, max_attempts: int, limit: int) -> List[OutboxMessage]:
        """Failed messages below the attempt ceiling, oldest first.

        Rows are locked so parallel replay runs skip each other's work.
        """
        stmt = (
            select(outbox_table)
            .where(
                and_(
                    outbox_table.c.status.in_(
                        [OutboxStatus.PENDING.value, OutboxStatus.FAILED.value]
                    ),
                    outbox_table.c.attempts < max_attempts,
                )
            )
            .order_by(outbox_table.c.created_at.asc())
            .limit(limit)
            .with_for_update(skip_locked=True)
        )
        result = await self.session.execute(stmt)
        return [row_to_outbox_message(row._asdict()) for row in result.fetchall()]

    async def mark_done(self, message_id: OutboxMessageId) -> None:
        """Mark a message delivered."""
        stmt = (
            update(outbox_table)
            .where(outbox_table.c.id == message_id)
            .values(
                status=OutboxStatus.DONE.value,
                attempts=outbox_table.c.attempts + 1,
                processed_at=datetime.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def record_failure(self, message_id: OutboxMessageId, error: str) -> None:
        """Bump the attempt count and store the latest error."""
        stmt = (
            update(outbox_table)
            .where(outbox_table.c.id == message_id)
            .values(
                status=OutboxStatus.FAILED.value,
                attempts=outbox_table.c.attempts + 1,
                last_error=error[:1000],
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
