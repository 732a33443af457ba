"""PostgreSQL implementation of ContentFlag repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import ContentFlag
from loop.domain.repository import ContentFlagRepository
from loop.domain.value import FlagId, FlagStatus, FlagTarget, UserId
from loop.persistence.mappers import flag_to_dict, row_to_flag
from loop.persistence.tables import content_flags_table


class PostgresContentFlagRepository(ContentFlagRepository):
    """PostgreSQL implementation of ContentFlagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, flag_id: FlagId) -> Optional[ContentFlag]:
        stmt = select(content_flags_table).where(content_flags_table.c.id == flag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_flag(row._asdict()) if row else None

    async def find_open(
        self, reporter_id: UserId, target_type: FlagTarget, target_id: UUID
    ) -> Optional[ContentFlag]:
        stmt = select(content_flags_table).where(
            content_flags_table.c.reporter_id == reporter_id,
            content_flags_table.c.target_type == target_type.value,
            content_flags_table.c.target_id == target_id,
            content_flags_table.c.status == FlagStatus.PENDING.value,
        )
        result = await self.session.execute(stmt)
        row = result.first()
        return row_to_flag(row._asdict()) if row else None

    async def find_by_status(
        self, status: Optional[FlagStatus], limit: int = 50, offset: int = 0
    ) -> List[ContentFlag]:
        """List flags newest first, optionally in one state."""
        stmt = select(content_flags_table)
        if status is not None:
            stmt = stmt.where(content_flags_table.c.status == status.value)
        stmt = (
            stmt.order_by(
                content_flags_table.c.created_at.desc(),
                content_flags_table.c.id.desc(),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_flag(row._asdict()) for row in result.fetchall()]

    async def save(self, flag: ContentFlag) -> ContentFlag:
        """Insert or update a flag. Only the review fields change after creation."""
        values = flag_to_dict(flag)
        stmt = insert(content_flags_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[content_flags_table.c.id],
            set_={
                "status": stmt.excluded.status,
                "moderator_id": stmt.excluded.moderator_id,
                "moderator_notes": stmt.excluded.moderator_notes,
                "action_taken": stmt.excluded.action_taken,
                "reviewed_at": stmt.excluded.reviewed_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return flag
