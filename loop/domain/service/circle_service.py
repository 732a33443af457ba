"""Circle domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from loop.domain.error import NotFoundError
from loop.domain.model.circle import Circle, CircleMember
from loop.domain.repository import CircleRepository
from loop.domain.value import CircleId, CircleRole, UserId

from .base import Service


class CircleService(Service):
    """Domain service for circles and memberships."""

    def __init__(self, circle_repository: CircleRepository) -> None:
        """Initialize circle service.

        Args:
            circle_repository: Circle repository
        """
        self.circle_repository = circle_repository

    async def create(
        self, owner_id: UserId, name: str, description: Optional[str] = None
    ) -> Circle:
        """Create a circle. The owner becomes its first member."""
        with logfire.span("circle_service.create", owner_id=str(owner_id), name=name):
            now = datetime.now()
            circle = Circle(
                id=CircleId(uuid4()),
                name=name,
                description=description,
                owner_id=owner_id,
                member_count=1,
                created_at=now,
            )
            saved = await self.circle_repository.save(circle)
            await self.circle_repository.add_member(
                CircleMember(
                    circle_id=saved.id,
                    user_id=owner_id,
                    role=CircleRole.OWNER,
                    joined_at=now,
                )
            )
            logfire.info("Circle created", circle_id=str(saved.id))
            return saved

    async def get(self, circle_id: CircleId) -> Circle:
        """Get a circle.

        Raises:
            NotFoundError: If the circle does not exist
        """
        circle = await self.circle_repository.find_by_id(circle_id)
        if circle is None:
            raise NotFoundError("Circle", str(circle_id))
        return circle

    async def join(self, circle_id: CircleId, user_id: UserId) -> bool:
        """Join a circle. Joining twice is a no-op.

        Returns:
            True if the user was added, False if already a member

        Raises:
            NotFoundError: If the circle does not exist
        """
        with logfire.span(
            "circle_service.join", circle_id=str(circle_id), user_id=str(user_id)
        ):
            await self.get(circle_id)
            joined = await self.circle_repository.add_member(
                CircleMember(
                    circle_id=circle_id,
                    user_id=user_id,
                    role=CircleRole.MEMBER,
                    joined_at=datetime.now(),
                )
            )
            if joined:
                logfire.info("Circle joined", circle_id=str(circle_id))
            return joined

    async def is_member(self, circle_id: CircleId, user_id: UserId) -> bool:
        return await self.circle_repository.is_member(circle_id, user_id)
