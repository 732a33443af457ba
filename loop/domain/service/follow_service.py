"""Follow domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from loop.domain.error import ConflictError, ValidationError
from loop.domain.model.follow import Follow
from loop.domain.model.side_effect import Notify
from loop.domain.repository import FollowRepository
from loop.domain.value import FollowId, NotificationType, UserId

from .base import Service
from .profile_service import ProfileService
from .side_effect_service import SideEffectDispatcher


class FollowService(Service):
    """Domain service for the follow graph."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            profile_service: Follower names for notifications
            dispatcher: Side-effect dispatcher
        """
        self.follow_repository = follow_repository
        self.profile_service = profile_service
        self.dispatcher = dispatcher

    async def follow(self, follower_id: UserId, following_id: UserId) -> Follow:
        """Follow a user and notify them.

        Raises:
            ValidationError: If a user tries to follow themselves
            ConflictError: If already following
        """
        with logfire.span(
            "follow_service.follow",
            follower_id=str(follower_id),
            following_id=str(following_id),
        ):
            if follower_id == following_id:
                raise ValidationError("Users cannot follow themselves")

            follow = Follow(
                id=FollowId(uuid4()),
                follower_id=follower_id,
                following_id=following_id,
                created_at=datetime.now(),
            )
            try:
                saved = await self.follow_repository.save(follow)
            except IntegrityError:
                logfire.warn(
                    "Duplicate follow attempt",
                    follower_id=str(follower_id),
                    following_id=str(following_id),
                )
                raise ConflictError("Already following this user")

            name = await self.profile_service.display_name(follower_id)
            await self.dispatcher.dispatch(
                Notify(
                    recipient_id=following_id,
                    type=NotificationType.FOLLOW,
                    title=f"{name} started following you",
                    message="You have a new follower",
                    data={"user_id": str(follower_id)},
                )
            )
            return saved

    async def unfollow(self, follower_id: UserId, following_id: UserId) -> bool:
        """Stop following a user.

        Returns:
            True if an edge was removed, False if there was nothing to remove
        """
        with logfire.span(
            "follow_service.unfollow",
            follower_id=str(follower_id),
            following_id=str(following_id),
        ):
            return await self.follow_repository.delete(follower_id, following_id)

    async def is_following(self, follower_id: UserId, following_id: UserId) -> bool:
        return await self.follow_repository.exists(follower_id, following_id)

    async def followers(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Follow]:
        return await self.follow_repository.find_followers(
            user_id, limit=limit, offset=offset
        )

    async def following(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Follow]:
        return await self.follow_repository.find_following(
            user_id, limit=limit, offset=offset
        )

    async def follower_ids(self, user_id: UserId) -> list[UserId]:
        """Every follower of a user, for fan-out."""
        return await self.follow_repository.find_follower_ids(user_id)
