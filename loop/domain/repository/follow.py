"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import List

from loop.domain.model.follow import Follow
from loop.domain.value import UserId


class FollowRepository(ABC):
    """Repository for follow edges."""

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Insert a follow edge.

        Raises:
            IntegrityError: If the edge already exists (duplicate)
        """
        pass

    @abstractmethod
    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow edge.

        Returns:
            True if an edge was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether follower follows following."""
        pass

    @abstractmethod
    async def find_following_ids(self, follower_id: UserId) -> List[UserId]:
        """IDs of everyone the user follows."""
        pass

    @abstractmethod
    async def find_follower_ids(self, following_id: UserId) -> List[UserId]:
        """IDs of everyone following the user."""
        pass

    @abstractmethod
    async def find_followers(
        self, following_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Follow]:
        """Edges pointing at the user, newest first."""
        pass

    @abstractmethod
    async def find_following(
        self, follower_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Follow]:
        """Edges leaving the user, newest first."""
        pass
