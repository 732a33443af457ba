"""Loop domain service.

Owns the loop tree: creating roots and branches, reading nodes and
children, and deleting subtrees.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from loop.config import FeedSettings
from loop.domain.error import (
    DepthLimitExceededError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from loop.domain.model.loop import MAX_BRANCH_DEPTH, Loop
from loop.domain.model.side_effect import AdjustCounter, Broadcast, Notify
from loop.domain.repository import CircleRepository, LoopRepository
from loop.domain.value import (
    Capability,
    CircleId,
    CounterName,
    LoopContent,
    LoopId,
    NotificationType,
    UserId,
    Visibility,
)

from .base import Service
from .capability_service import CapabilityService
from .counter_service import CounterService
from .profile_service import ProfileService
from .side_effect_service import SideEffectDispatcher


class LoopService(Service):
    """Domain service for loop tree operations."""

    def __init__(
        self,
        loop_repository: LoopRepository,
        circle_repository: CircleRepository,
        counter_service: CounterService,
        capability_service: CapabilityService,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize loop service.

        Args:
            loop_repository: Loop repository
            circle_repository: Circle repository (membership checks)
            counter_service: Counter domain service
            capability_service: Capability checks for moderation
            profile_service: Author names for notifications
            dispatcher: Side-effect dispatcher
            feed_settings: Branch depth ceiling
        """
        self.loop_repository = loop_repository
        self.circle_repository = circle_repository
        self.counter_service = counter_service
        self.capability_service = capability_service
        self.profile_service = profile_service
        self.dispatcher = dispatcher
        self.max_depth = min(feed_settings.max_branch_depth, MAX_BRANCH_DEPTH)

    async def create_root(
        self,
        author_id: UserId,
        content: LoopContent,
        circle_id: Optional[CircleId] = None,
        visibility: Visibility = Visibility.PUBLIC,
    ) -> Loop:
        """Create a root loop.

        Args:
            author_id: Author user ID
            content: Loop content
            circle_id: Circle to post into (author must be a member)
            visibility: Feed visibility

        Returns:
            Created loop (depth 0)

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the circle does not exist
            ForbiddenError: If the author is not a circle member
        """
        with logfire.span(
            "loop_service.create_root",
            author_id=str(author_id),
            content_type=content.type,
            circle_id=str(circle_id) if circle_id else None,
        ):
            self._require_content(content)

            if circle_id is not None:
                circle = await self.circle_repository.find_by_id(circle_id)
                if circle is None:
                    raise NotFoundError("Circle", str(circle_id))
                if not await self.circle_repository.is_member(circle_id, author_id):
                    raise ForbiddenError("post in", "circle", str(circle_id), str(author_id))

            loop = Loop(
                id=LoopId(uuid4()),
                author_id=author_id,
                parent_id=None,
                depth=0,
                content=content,
                circle_id=circle_id,
                visibility=visibility,
                created_at=datetime.now(),
            )
            saved = await self.loop_repository.save(loop)
            await self.counter_service.initialize(saved.id)

            logfire.info("Root loop created", loop_id=str(saved.id))
            return saved

    async def create_branch(
        self, author_id: UserId, parent_id: LoopId, content: LoopContent
    ) -> Loop:
        """Branch from an existing loop.

        The branch sits one level below its parent and inherits the parent's
        circle and visibility. After the insert, the parent's branch counter
        is incremented, the parent's author is notified and a `new_branch`
        event is broadcast; none of those can fail the branch.

        Args:
            author_id: Author user ID
            parent_id: Loop to branch from
            content: Branch content

        Returns:
            Created branch

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the parent does not exist
            DepthLimitExceededError: If the parent is at the depth ceiling
        """
        with logfire.span(
            "loop_service.create_branch",
            author_id=str(author_id),
            parent_id=str(parent_id),
        ):
            self._require_content(content)

            parent = await self.loop_repository.find_by_id(parent_id)
            if parent is None:
                logfire.warn("Branch of non-existent loop", parent_id=str(parent_id))
                raise NotFoundError("Loop", str(parent_id))

            if parent.depth >= self.max_depth:
                logfire.warn(
                    "Branch depth limit reached",
                    parent_id=str(parent_id),
                    parent_depth=parent.depth,
                )
                raise DepthLimitExceededError(
                    str(parent_id), parent.depth, self.max_depth
                )

            branch = Loop(
                id=LoopId(uuid4()),
                author_id=author_id,
                parent_id=parent.id,
                depth=parent.depth + 1,
                content=content,
                circle_id=parent.circle_id,
                visibility=parent.visibility,
                created_at=datetime.now(),
            )
            saved = await self.loop_repository.save(branch)
            await self.counter_service.initialize(saved.id)

            effects = [
                AdjustCounter(loop_id=parent.id, counter=CounterName.BRANCHES, delta=1)
            ]
            if parent.author_id != author_id:
                name = await self.profile_service.display_name(author_id)
                effects.append(
                    Notify(
                        recipient_id=parent.author_id,
                        type=NotificationType.BRANCH,
                        title=f"{name} branched your loop",
                        message="Someone continued your loop with a new branch",
                        data={
                            "loop_id": str(parent.id),
                            "branch_id": str(saved.id),
                            "user_id": str(author_id),
                        },
                    )
                )
            effects.append(
                Broadcast(
                    room=f"loop:{parent.id}",
                    event="new_branch",
                    payload={
                        "loop_id": str(parent.id),
                        "branch_id": str(saved.id),
                        "author_id": str(author_id),
                        "depth": saved.depth,
                    },
                )
            )
            await self.dispatcher.dispatch_all(effects)

            logfire.info(
                "Branch created",
                loop_id=str(saved.id),
                parent_id=str(parent.id),
                depth=saved.depth,
            )
            return saved

    async def get(self, loop_id: LoopId) -> Loop:
        """Get a loop.

        Raises:
            NotFoundError: If the loop does not exist
        """
        with logfire.span("loop_service.get", loop_id=str(loop_id)):
            loop = await self.loop_repository.find_by_id(loop_id)
            if loop is None:
                logfire.warn("Loop not found", loop_id=str(loop_id))
                raise NotFoundError("Loop", str(loop_id))
            return loop

    async def list_branches(
        self, parent_id: LoopId, limit: int = 20, offset: int = 0
    ) -> list[Loop]:
        """List direct branches of a loop, oldest first.

        Raises:
            NotFoundError: If the parent does not exist
        """
        await self.get(parent_id)
        return await self.loop_repository.find_children(
            parent_id, limit=limit, offset=offset
        )

    async def delete(self, loop_id: LoopId, requester_id: UserId) -> int:
        """Delete a loop together with its whole subtree.

        Allowed for the author and for moderators. When the loop is a branch,
        its parent's branch counter goes down by one.

        Returns:
            Number of loops removed

        Raises:
            NotFoundError: If the loop does not exist
            ForbiddenError: If the requester may not delete it
        """
        with logfire.span(
            "loop_service.delete", loop_id=str(loop_id), requester_id=str(requester_id)
        ):
            loop = await self.get(loop_id)

            if loop.author_id != requester_id:
                await self.capability_service.require(
                    requester_id,
                    Capability.MODERATE_CONTENT,
                    "delete",
                    "loop",
                    str(loop_id),
                )

            removed = await self.loop_repository.delete_subtree(loop_id)

            if loop.parent_id is not None:
                await self.dispatcher.dispatch(
                    AdjustCounter(
                        loop_id=loop.parent_id,
                        counter=CounterName.BRANCHES,
                        delta=-1,
                    )
                )

            logfire.info("Loop subtree deleted", loop_id=str(loop_id), removed=removed)
            return removed

    def _require_content(self, content: LoopContent) -> None:
        if content.is_empty():
            raise ValidationError("Loop content is required")
