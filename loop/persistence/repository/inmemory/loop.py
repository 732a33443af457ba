"""In-memory loop repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from loop.domain.model import Loop
from loop.domain.repository import LoopRepository
from loop.domain.value import LoopId, TrendingWeights, UserId, Visibility, searchable_text

from .database import InMemoryDatabase


class InMemoryLoopRepository(LoopRepository):
    """In-memory implementation of LoopRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, loop_id: LoopId) -> Optional[Loop]:
        return self.db.loops.get(loop_id)

    async def find_by_ids(self, loop_ids: Sequence[LoopId]) -> list[Loop]:
        return [self.db.loops[i] for i in loop_ids if i in self.db.loops]

    async def save(self, loop: Loop) -> Loop:
        if loop.parent_id is not None and loop.parent_id not in self.db.loops:
            raise IntegrityError("Parent loop does not exist", None, Exception())
        self.db.loops[loop.id] = loop
        return loop

    async def find_children(
        self, parent_id: LoopId, limit: int = 20, offset: int = 0
    ) -> list[Loop]:
        children = [l for l in self.db.loops.values() if l.parent_id == parent_id]
        children.sort(key=lambda l: l.created_at)
        return children[offset : offset + limit]

    async def delete_subtree(self, loop_id: LoopId) -> int:
        ids = self.db.subtree_ids(loop_id)
        self.db.delete_loops(ids)
        return len(ids)

    def _public_roots(self) -> list[Loop]:
        return [
            l
            for l in self.db.loops.values()
            if l.parent_id is None and l.visibility == Visibility.PUBLIC
        ]

    async def find_public_roots(
        self,
        author_ids: Optional[Sequence[UserId]] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Loop]:
        loops = self._public_roots()
        if author_ids is not None:
            authors = set(author_ids)
            loops = [l for l in loops if l.author_id in authors]

        loops.sort(key=lambda l: l.created_at, reverse=True)
        return loops[offset : offset + limit]

    async def search_public(
        self, query: str, limit: int = 20, offset: int = 0
    ) -> list[Loop]:
        needle = query.lower()
        loops = [
            l
            for l in self.db.loops.values()
            if l.visibility == Visibility.PUBLIC
            and needle in searchable_text(l.content).lower()
        ]
        loops.sort(key=lambda l: (l.created_at, l.id), reverse=True)
        return loops[offset : offset + limit]

    async def find_trending(
        self,
        since: datetime,
        weights: TrendingWeights,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Loop]:
        scores: dict[LoopId, float] = {}

        for interaction in self.db.interactions.values():
            if interaction.created_at >= since:
                scores[interaction.loop_id] = scores.get(
                    interaction.loop_id, 0.0
                ) + weights.for_interaction(interaction.interaction_type)

        for loop in self.db.loops.values():
            if loop.parent_id is not None and loop.created_at >= since:
                scores[loop.parent_id] = (
                    scores.get(loop.parent_id, 0.0) + weights.branch
                )

        for comment in self.db.comments.values():
            if comment.created_at >= since:
                scores[comment.loop_id] = (
                    scores.get(comment.loop_id, 0.0) + weights.comment
                )

        loops = self._public_roots()
        loops.sort(key=lambda l: (scores.get(l.id, 0.0), l.created_at), reverse=True)
        return loops[offset : offset + limit]
