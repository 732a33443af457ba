"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import Comment
from loop.domain.repository import CommentRepository
from loop.domain.value import CommentId, LoopId
from loop.persistence.mappers import row_to_comment
from loop.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_loop(self, loop_id: LoopId) -> List[Comment]:
        """Find every comment on a loop, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.loop_id == loop_id)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = insert(comments_table).values(**comment.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment; replies go with it through the cascade."""
        thread = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .cte("thread", recursive=True)
        )
        thread = thread.union_all(
            select(comments_table.c.id).where(comments_table.c.parent_id == thread.c.id)
        )
        count_result = await self.session.execute(
            select(func.count()).select_from(thread)
        )
        removed = count_result.scalar_one()

        if removed:
            await self.session.execute(
                delete(comments_table).where(comments_table.c.id == comment_id)
            )
            await self.session.flush()
        return removed
