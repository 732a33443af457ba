"""PostgreSQL implementation of Follow repository."""

from typing import List

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import Follow
from loop.domain.repository import FollowRepository
from loop.domain.value import UserId
from loop.persistence.mappers import row_to_follow
from loop.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, follow: Follow) -> Follow:
        """Insert a follow edge (IntegrityError on duplicates)."""
        stmt = insert(follows_table).values(**follow.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return follow

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow edge."""
        stmt = delete(follows_table).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.following_id == following_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether follower follows following."""
        stmt = select(follows_table.c.id).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.following_id == following_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def find_following_ids(self, follower_id: UserId) -> List[UserId]:
        """IDs of everyone the user follows."""
        stmt = select(follows_table.c.following_id).where(
            follows_table.c.follower_id == follower_id
        )
        result = await self.session.execute(stmt)
        return [UserId(row[0]) for row in result.fetchall()]

    async def find_follower_ids(self, following_id: UserId) -> List[UserId]:
        """IDs of everyone following the user."""
        stmt = select(follows_table.c.follower_id).where(
            follows_table.c.following_id == following_id
        )
        result = await self.session.execute(stmt)
        return [UserId(row[0]) for row in result.fetchall()]

    async def find_followers(
        self, following_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Follow]:
        """Edges pointing at the user, newest first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.following_id == following_id)
            .order_by(follows_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def find_following(
        self, follower_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Follow]:
        """Edges leaving the user, newest first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.follower_id == follower_id)
            .order_by(follows_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]
