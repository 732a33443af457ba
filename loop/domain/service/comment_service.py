"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from loop.domain.error import NotFoundError, ValidationError
from loop.domain.model.comment import Comment, CommentThread
from loop.domain.model.side_effect import AdjustCounter, Broadcast, Notify
from loop.domain.repository import CommentRepository
from loop.domain.value import (
    Capability,
    CommentId,
    CounterName,
    LoopId,
    NotificationType,
    UserId,
)

from .base import Service
from .capability_service import CapabilityService
from .loop_service import LoopService
from .notification_service import preview
from .profile_service import ProfileService
from .side_effect_service import SideEffectDispatcher


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        loop_service: LoopService,
        capability_service: CapabilityService,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            loop_service: Loop lookups
            capability_service: Moderator checks for deletes
            profile_service: Author names for notifications
            dispatcher: Side-effect dispatcher
        """
        self.comment_repository = comment_repository
        self.loop_service = loop_service
        self.capability_service = capability_service
        self.profile_service = profile_service
        self.dispatcher = dispatcher

    async def create(
        self,
        loop_id: LoopId,
        author_id: UserId,
        text: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Comment on a loop or reply to a comment.

        Bumps the loop's comment counter, notifies the loop author and (for
        replies) the parent comment's author, and broadcasts `new_comment`.

        Raises:
            ValidationError: If text is blank or the parent is on another loop
            NotFoundError: If the loop or parent comment does not exist
        """
        with logfire.span(
            "comment_service.create",
            loop_id=str(loop_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = text.strip()
            if not text:
                raise ValidationError("Comment content is required")

            loop = await self.loop_service.get(loop_id)

            parent: Optional[Comment] = None
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    raise NotFoundError("Comment", str(parent_id))
                if parent.loop_id != loop_id:
                    raise ValidationError("Parent comment belongs to another loop")
                # Threads are one level deep, replies to replies join the thread
                parent_id = parent.parent_id or parent.id

            comment = Comment(
                id=CommentId(uuid4()),
                loop_id=loop_id,
                author_id=author_id,
                text=text,
                parent_id=parent_id,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)

            effects = [
                AdjustCounter(loop_id=loop_id, counter=CounterName.COMMENTS, delta=1)
            ]
            name = await self.profile_service.display_name(author_id)
            data = {
                "loop_id": str(loop_id),
                "comment_id": str(saved.id),
                "user_id": str(author_id),
            }
            if loop.author_id != author_id:
                effects.append(
                    Notify(
                        recipient_id=loop.author_id,
                        type=NotificationType.COMMENT,
                        title=f"{name} commented on your loop",
                        message=preview(text),
                        data=data,
                    )
                )
            if (
                parent is not None
                and parent.author_id != author_id
                and parent.author_id != loop.author_id
            ):
                effects.append(
                    Notify(
                        recipient_id=parent.author_id,
                        type=NotificationType.REPLY,
                        title=f"{name} replied to your comment",
                        message=preview(text),
                        data={**data, "parent_id": str(parent.id)},
                    )
                )
            effects.append(
                Broadcast(
                    room=f"loop:{loop_id}",
                    event="new_comment",
                    payload={
                        "loop_id": str(loop_id),
                        "comment": saved.model_dump(mode="json"),
                    },
                )
            )
            await self.dispatcher.dispatch_all(effects)

            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def list_threads(self, loop_id: LoopId) -> list[CommentThread]:
        """Top-level comments newest first, each with replies oldest first.

        Raises:
            NotFoundError: If the loop does not exist
        """
        await self.loop_service.get(loop_id)
        comments = await self.comment_repository.find_by_loop(loop_id)

        replies: dict[CommentId, list[Comment]] = {}
        top_level: list[Comment] = []
        for comment in comments:
            if comment.parent_id is None:
                top_level.append(comment)
            else:
                replies.setdefault(comment.parent_id, []).append(comment)

        top_level.sort(key=lambda c: c.created_at, reverse=True)
        return [
            CommentThread(
                comment=comment,
                replies=sorted(replies.get(comment.id, []), key=lambda c: c.created_at),
            )
            for comment in top_level
        ]

    async def delete(
        self, loop_id: LoopId, comment_id: CommentId, requester_id: UserId
    ) -> int:
        """Delete a comment and its replies.

        Allowed for the comment author and moderators.

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment is not on this loop
            ForbiddenError: If the requester may not delete it
        """
        with logfire.span(
            "comment_service.delete",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None or comment.loop_id != loop_id:
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != requester_id:
                await self.capability_service.require(
                    requester_id,
                    Capability.MODERATE_CONTENT,
                    "delete",
                    "comment",
                    str(comment_id),
                )

            removed = await self.comment_repository.delete(comment_id)
            if removed:
                await self.dispatcher.dispatch(
                    AdjustCounter(
                        loop_id=loop_id, counter=CounterName.COMMENTS, delta=-removed
                    )
                )
            return removed
