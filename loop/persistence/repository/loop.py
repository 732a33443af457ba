"""PostgreSQL implementation of Loop repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import (
    Float,
    and_,
    case,
    delete,
    func,
    insert,
    literal,
    or_,
    select,
    union_all,
)
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import Loop
from loop.domain.repository import LoopRepository
from loop.domain.value import SEARCHABLE_FIELDS, LoopId, TrendingWeights, UserId, Visibility
from loop.persistence.mappers import loop_to_dict, row_to_loop
from loop.persistence.tables import comments_table, loop_interactions_table, loops_table
from loop.persistence.text_search import contains_pattern


class PostgresLoopRepository(LoopRepository):
    """PostgreSQL implementation of LoopRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, loop_id: LoopId) -> Optional[Loop]:
        """Find a loop by ID."""
        stmt = select(loops_table).where(loops_table.c.id == loop_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_loop(row._asdict()) if row else None

    async def find_by_ids(self, loop_ids: Sequence[LoopId]) -> List[Loop]:
        """Find several loops at once (batch query)."""
        if not loop_ids:
            return []

        stmt = select(loops_table).where(loops_table.c.id.in_(loop_ids))
        result = await self.session.execute(stmt)
        return [row_to_loop(row._asdict()) for row in result.fetchall()]

    async def save(self, loop: Loop) -> Loop:
        """Insert a new loop."""
        stmt = insert(loops_table).values(**loop_to_dict(loop))
        await self.session.execute(stmt)
        await self.session.flush()
        return loop

    async def find_children(
        self, parent_id: LoopId, limit: int = 20, offset: int = 0
    ) -> List[Loop]:
        """Find direct branches of a loop, oldest first."""
        stmt = (
            select(loops_table)
            .where(loops_table.c.parent_id == parent_id)
            .order_by(loops_table.c.created_at.asc(), loops_table.c.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_loop(row._asdict()) for row in result.fetchall()]

    async def delete_subtree(self, loop_id: LoopId) -> int:
        """Delete a loop and its descendants.

        The foreign keys cascade the delete down the tree and into stats,
        interactions and comments. The subtree is counted first so callers
        know how much went.
        """
        with logfire.span("loop_repository.delete_subtree", loop_id=str(loop_id)):
            tree = (
                select(loops_table.c.id)
                .where(loops_table.c.id == loop_id)
                .cte("subtree", recursive=True)
            )
            tree = tree.union_all(
                select(loops_table.c.id).where(loops_table.c.parent_id == tree.c.id)
            )
            count_result = await self.session.execute(
                select(func.count()).select_from(tree)
            )
            removed = count_result.scalar_one()

            if removed:
                await self.session.execute(
                    delete(loops_table).where(loops_table.c.id == loop_id)
                )
                await self.session.flush()

            logfire.info("Subtree removed", loop_id=str(loop_id), removed=removed)
            return removed

    async def find_public_roots(
        self,
        author_ids: Optional[Sequence[UserId]] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Loop]:
        """Find public root loops, newest first."""
        conditions = [
            loops_table.c.parent_id.is_(None),
            loops_table.c.visibility == Visibility.PUBLIC.value,
        ]
        if author_ids is not None:
            if not author_ids:
                return []
            conditions.append(loops_table.c.author_id.in_(author_ids))

        stmt = (
            select(loops_table)
            .where(and_(*conditions))
            .order_by(loops_table.c.created_at.desc(), loops_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_loop(row._asdict()) for row in result.fetchall()]

    async def search_public(
        self, query: str, limit: int = 20, offset: int = 0
    ) -> List[Loop]:
        """Substring search over the free-text fields of public loops."""
        pattern = contains_pattern(query)
        matches = [
            loops_table.c.content[field].astext.ilike(pattern, escape="\\")
            for field in SEARCHABLE_FIELDS
        ]
        stmt = (
            select(loops_table)
            .where(
                loops_table.c.visibility == Visibility.PUBLIC.value,
                or_(*matches),
            )
            .order_by(loops_table.c.created_at.desc(), loops_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_loop(row._asdict()) for row in result.fetchall()]

    async def find_trending(
        self,
        since: datetime,
        weights: TrendingWeights,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Loop]:
        """Rank public roots by weighted activity inside the window.

        Every interaction, branch and comment created after `since` becomes
        one scored activity row; the scores are summed per loop in the
        database so only the requested page comes back.
        """
        with logfire.span(
            "loop_repository.find_trending", since=since.isoformat(), limit=limit
        ):
            interaction_scores = select(
                loop_interactions_table.c.loop_id.label("loop_id"),
                case(
                    {
                        "like": weights.like,
                        "save": weights.save,
                        "share": weights.share,
                        "view": weights.view,
                    },
                    value=loop_interactions_table.c.interaction_type,
                    else_=0.0,
                ).label("score"),
            ).where(loop_interactions_table.c.created_at >= since)

            branch_scores = select(
                loops_table.c.parent_id.label("loop_id"),
                literal(weights.branch, Float).label("score"),
            ).where(
                and_(
                    loops_table.c.parent_id.is_not(None),
                    loops_table.c.created_at >= since,
                )
            )

            comment_scores = select(
                comments_table.c.loop_id.label("loop_id"),
                literal(weights.comment, Float).label("score"),
            ).where(comments_table.c.created_at >= since)

            activity = union_all(
                interaction_scores, branch_scores, comment_scores
            ).subquery("activity")

            scores = (
                select(
                    activity.c.loop_id,
                    func.sum(activity.c.score).label("score"),
                )
                .group_by(activity.c.loop_id)
                .subquery("scores")
            )

            stmt = (
                select(loops_table)
                .outerjoin(scores, scores.c.loop_id == loops_table.c.id)
                .where(
                    and_(
                        loops_table.c.parent_id.is_(None),
                        loops_table.c.visibility == Visibility.PUBLIC.value,
                    )
                )
                .order_by(
                    func.coalesce(scores.c.score, 0.0).desc(),
                    loops_table.c.created_at.desc(),
                    loops_table.c.id.desc(),
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_loop(row._asdict()) for row in result.fetchall()]
