"""Content flag domain service.

Any signed-in user may flag a loop, a comment or another user. Flags queue
up as `pending` until a moderator resolves or dismisses them.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

import logfire

from loop.domain.error import ConflictError, NotFoundError, ValidationError
from loop.domain.model.flag import ContentFlag
from loop.domain.repository import (
    CommentRepository,
    ContentFlagRepository,
    LoopRepository,
    ProfileRepository,
)
from loop.domain.value import (
    Capability,
    CommentId,
    FlagId,
    FlagReason,
    FlagStatus,
    FlagTarget,
    LoopId,
    UserId,
)

from .base import Service
from .capability_service import CapabilityService

CLOSED_STATUSES = (FlagStatus.RESOLVED, FlagStatus.DISMISSED)


class FlagService(Service):
    """Domain service for content flags."""

    def __init__(
        self,
        flag_repository: ContentFlagRepository,
        loop_repository: LoopRepository,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        capability_service: CapabilityService,
    ) -> None:
        """Initialize flag service.

        Args:
            flag_repository: Content flag repository
            loop_repository: Resolves loop targets
            comment_repository: Resolves comment targets
            profile_repository: Resolves user targets
            capability_service: Gates the moderation queue
        """
        self.flag_repository = flag_repository
        self.loop_repository = loop_repository
        self.comment_repository = comment_repository
        self.profile_repository = profile_repository
        self.capability_service = capability_service

    async def create(
        self,
        reporter_id: UserId,
        target_type: FlagTarget,
        target_id: UUID,
        reason: FlagReason,
        description: str = "",
    ) -> ContentFlag:
        """Flag a loop, comment or user.

        Raises:
            NotFoundError: If the target does not exist
            ValidationError: If a user flags themselves
            ConflictError: If the reporter already has a pending flag on the target
        """
        with logfire.span(
            "flag_service.create",
            reporter_id=str(reporter_id),
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            await self._ensure_target(target_type, target_id)
            if target_type == FlagTarget.USER and target_id == reporter_id:
                raise ValidationError("Cannot flag yourself")

            existing = await self.flag_repository.find_open(
                reporter_id, target_type, target_id
            )
            if existing is not None:
                raise ConflictError(f"{target_type.value} already flagged")

            flag = ContentFlag(
                id=FlagId(uuid4()),
                target_type=target_type,
                target_id=target_id,
                reporter_id=reporter_id,
                reason=reason,
                description=description,
                created_at=datetime.now(),
            )
            saved = await self.flag_repository.save(flag)
            logfire.info(
                "Content flagged",
                flag_id=str(saved.id),
                target_type=target_type.value,
                reason=reason.value,
            )
            return saved

    async def list(
        self,
        requester_id: UserId,
        status: Optional[FlagStatus] = FlagStatus.PENDING,
        limit: int = 50,
        offset: int = 0,
    ) -> List[ContentFlag]:
        """Moderation queue, newest first.

        Raises:
            ForbiddenError: Without the moderate_content capability
        """
        await self.capability_service.require(
            requester_id, Capability.MODERATE_CONTENT, "list", "flags", "*"
        )
        return await self.flag_repository.find_by_status(status, limit, offset)

    async def get(self, flag_id: FlagId, requester_id: UserId) -> ContentFlag:
        """Fetch one flag. Visible to its reporter and to moderators."""
        flag = await self.flag_repository.find_by_id(flag_id)
        if flag is None:
            raise NotFoundError("Flag", str(flag_id))
        if flag.reporter_id != requester_id:
            await self.capability_service.require(
                requester_id, Capability.MODERATE_CONTENT, "view", "flag", str(flag_id)
            )
        return flag

    async def resolve(
        self,
        flag_id: FlagId,
        moderator_id: UserId,
        status: FlagStatus,
        notes: Optional[str] = None,
        action_taken: Optional[str] = None,
    ) -> ContentFlag:
        """Close a pending flag as resolved or dismissed.

        Raises:
            ForbiddenError: Without the moderate_content capability
            NotFoundError: If the flag does not exist
            ValidationError: If `status` is not a closing state
            ConflictError: If the flag was already reviewed
        """
        with logfire.span(
            "flag_service.resolve",
            flag_id=str(flag_id),
            moderator_id=str(moderator_id),
            status=status.value,
        ):
            await self.capability_service.require(
                moderator_id, Capability.MODERATE_CONTENT, "resolve", "flag", str(flag_id)
            )
            if status not in CLOSED_STATUSES:
                raise ValidationError("Status must be resolved or dismissed")

            flag = await self.flag_repository.find_by_id(flag_id)
            if flag is None:
                raise NotFoundError("Flag", str(flag_id))
            if not flag.is_open:
                raise ConflictError(f"Flag already {flag.status.value}")

            reviewed = await self.flag_repository.save(
                flag.model_copy(
                    update={
                        "status": status,
                        "moderator_id": moderator_id,
                        "moderator_notes": notes,
                        "action_taken": action_taken,
                        "reviewed_at": datetime.now(),
                    }
                )
            )
            logfire.info("Flag reviewed", flag_id=str(flag_id), status=status.value)
            return reviewed

    async def _ensure_target(self, target_type: FlagTarget, target_id: UUID) -> None:
        if target_type == FlagTarget.LOOP:
            found = await self.loop_repository.find_by_id(LoopId(target_id))
            resource = "Loop"
        elif target_type == FlagTarget.COMMENT:
            found = await self.comment_repository.find_by_id(CommentId(target_id))
            resource = "Comment"
        else:
            found = await self.profile_repository.find_by_id(UserId(target_id))
            resource = "User"
        if found is None:
            raise NotFoundError(resource, str(target_id))
