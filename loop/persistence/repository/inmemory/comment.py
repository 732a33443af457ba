"""In-memory comment repository for testing."""

from typing import Optional

from loop.domain.model import Comment
from loop.domain.repository import CommentRepository
from loop.domain.value import CommentId, LoopId

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self.db.comments.get(comment_id)

    async def find_by_loop(self, loop_id: LoopId) -> list[Comment]:
        comments = [c for c in self.db.comments.values() if c.loop_id == loop_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        self.db.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        ids = self.db.comment_thread_ids(comment_id)
        for cid in ids:
            del self.db.comments[cid]
        return len(ids)
