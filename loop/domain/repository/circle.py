"""Circle repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from loop.domain.model.circle import Circle, CircleMember
from loop.domain.value import CircleId, UserId


class CircleRepository(ABC):
    """Repository for Circle aggregate and its memberships."""

    @abstractmethod
    async def find_by_id(self, circle_id: CircleId) -> Optional[Circle]:
        """Find a circle by ID, with its current member count.

        Args:
            circle_id: The circle ID

        Returns:
            The circle if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, circle: Circle) -> Circle:
        """Insert a circle."""
        pass

    @abstractmethod
    async def add_member(self, member: CircleMember) -> bool:
        """Add a member unless already present.

        Returns:
            True if the membership was created, False if it existed
        """
        pass

    @abstractmethod
    async def is_member(self, circle_id: CircleId, user_id: UserId) -> bool:
        """Check circle membership."""
        pass
