"""In-memory follow repository for testing."""

from sqlalchemy.exc import IntegrityError

from loop.domain.model import Follow
from loop.domain.repository import FollowRepository
from loop.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def save(self, follow: Follow) -> Follow:
        """Save a follow edge.

        Raises:
            IntegrityError: If the edge already exists (duplicate)
        """
        key = (follow.follower_id, follow.following_id)
        if key in self.db.follows:
            raise IntegrityError("Duplicate follow", None, Exception())
        self.db.follows[key] = follow
        return follow

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        return self.db.follows.pop((follower_id, following_id), None) is not None

    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        return (follower_id, following_id) in self.db.follows

    async def find_following_ids(self, follower_id: UserId) -> list[UserId]:
        return [
            f.following_id
            for f in self.db.follows.values()
            if f.follower_id == follower_id
        ]

    async def find_follower_ids(self, following_id: UserId) -> list[UserId]:
        return [
            f.follower_id
            for f in self.db.follows.values()
            if f.following_id == following_id
        ]

    async def find_followers(
        self, following_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Follow]:
        edges = [f for f in self.db.follows.values() if f.following_id == following_id]
        edges.sort(key=lambda f: f.created_at, reverse=True)
        return edges[offset : offset + limit]

    async def find_following(
        self, follower_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Follow]:
        edges = [f for f in self.db.follows.values() if f.follower_id == follower_id]
        edges.sort(key=lambda f: f.created_at, reverse=True)
        return edges[offset : offset + limit]
