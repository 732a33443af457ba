"""Comment entity.

Comments belong to a loop. A comment with a parent_id is a reply to
another comment on the same loop.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import CommentId, LoopId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    loop_id: LoopId
    author_id: UserId
    text: str = Field(min_length=1, max_length=2000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None


class CommentThread(DomainModel):
    """A top-level comment with its replies (oldest reply first)."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)
