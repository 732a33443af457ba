"""In-memory circle repository for testing."""

from typing import Optional

from loop.domain.model import Circle, CircleMember
from loop.domain.repository import CircleRepository
from loop.domain.value import CircleId, UserId

from .database import InMemoryDatabase


class InMemoryCircleRepository(CircleRepository):
    """In-memory implementation of CircleRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, circle_id: CircleId) -> Optional[Circle]:
        circle = self.db.circles.get(circle_id)
        if circle is None:
            return None
        count = sum(1 for cid, _ in self.db.circle_members if cid == circle_id)
        return circle.model_copy(update={"member_count": count})

    async def save(self, circle: Circle) -> Circle:
        self.db.circles[circle.id] = circle
        return circle

    async def add_member(self, member: CircleMember) -> bool:
        key = (member.circle_id, member.user_id)
        if key in self.db.circle_members:
            return False
        self.db.circle_members[key] = member
        return True

    async def is_member(self, circle_id: CircleId, user_id: UserId) -> bool:
        return (circle_id, user_id) in self.db.circle_members
