"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from loop.domain.model.comment import Comment
from loop.domain.value import CommentId, LoopId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_loop(self, loop_id: LoopId) -> List[Comment]:
        """Find every comment on a loop, oldest first.

        Args:
            loop_id: The loop ID

        Returns:
            Comments and replies on the loop
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies.

        Args:
            comment_id: The comment ID

        Returns:
            Number of comments removed (0 if it did not exist)
        """
        pass
