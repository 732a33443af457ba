"""PostgreSQL implementation of Interaction repository."""

from typing import List, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import Interaction
from loop.domain.repository import InteractionRepository
from loop.domain.value import InteractionType, LoopId, UserId
from loop.persistence.mappers import interaction_to_dict, row_to_interaction
from loop.persistence.tables import loop_interactions_table


class PostgresInteractionRepository(InteractionRepository):
    """PostgreSQL implementation of InteractionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert_if_absent(self, interaction: Interaction) -> bool:
        """Insert unless the (user, loop, type) row exists."""
        stmt = (
            insert(loop_interactions_table)
            .values(**interaction_to_dict(interaction))
            .on_conflict_do_nothing(constraint="uq_user_loop_interaction")
            .returning(loop_interactions_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    async def delete(
        self, user_id: UserId, loop_id: LoopId, interaction_type: InteractionType
    ) -> bool:
        """Delete an interaction."""
        stmt = (
            delete(loop_interactions_table)
            .where(
                and_(
                    loop_interactions_table.c.user_id == user_id,
                    loop_interactions_table.c.loop_id == loop_id,
                    loop_interactions_table.c.interaction_type
                    == interaction_type.value,
                )
            )
            .returning(loop_interactions_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def find_by_user_and_loops(
        self, user_id: UserId, loop_ids: Sequence[LoopId]
    ) -> List[Interaction]:
        """Find a user's interactions on multiple loops (batch query)."""
        if not loop_ids:
            return []

        stmt = select(loop_interactions_table).where(
            and_(
                loop_interactions_table.c.user_id == user_id,
                loop_interactions_table.c.loop_id.in_(loop_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_interaction(row._asdict()) for row in result.fetchall()]
