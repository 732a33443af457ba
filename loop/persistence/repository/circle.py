"""PostgreSQL implementation of Circle repository."""

from typing import Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import Circle, CircleMember
from loop.domain.repository import CircleRepository
from loop.domain.value import CircleId, UserId
from loop.persistence.mappers import row_to_circle
from loop.persistence.tables import circle_members_table, circles_table


class PostgresCircleRepository(CircleRepository):
    """PostgreSQL implementation of CircleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, circle_id: CircleId) -> Optional[Circle]:
        """Find a circle with its member count."""
        member_count = (
            select(func.count())
            .select_from(circle_members_table)
            .where(circle_members_table.c.circle_id == circles_table.c.id)
            .scalar_subquery()
            .label("member_count")
        )
        stmt = select(circles_table, member_count).where(
            circles_table.c.id == circle_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_circle(row._asdict()) if row else None

    async def save(self, circle: Circle) -> Circle:
        """Insert a circle."""
        stmt = insert(circles_table).values(
            **circle.model_dump(exclude={"member_count"})
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return circle

    async def add_member(self, member: CircleMember) -> bool:
        """Add a member unless already present."""
        stmt = (
            pg_insert(circle_members_table)
            .values(
                circle_id=member.circle_id,
                user_id=member.user_id,
                role=member.role.value,
                joined_at=member.joined_at,
            )
            .on_conflict_do_nothing(constraint="uq_circle_member")
            .returning(circle_members_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        added = result.fetchone() is not None
        await self.session.flush()
        return added

    async def is_member(self, circle_id: CircleId, user_id: UserId) -> bool:
        """Check circle membership."""
        stmt = select(circle_members_table.c.user_id).where(
            and_(
                circle_members_table.c.circle_id == circle_id,
                circle_members_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None
