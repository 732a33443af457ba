"""Interact with loop use case."""

from typing import Literal, Optional

import logfire
from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopStatsInfo
from loop.domain.error import ValidationError
from loop.domain.model import Broadcast, Loop, Notify, ToggleResult
from loop.domain.service import (
    CounterService,
    LoopService,
    ProfileService,
    SideEffectDispatcher,
)
from loop.domain.value import (
    InteractionType,
    LoopId,
    NotificationType,
    ToggleAction,
    UserId,
)


class InteractRequest(BaseModel):
    """Interact request.

    Without an action, like and save toggle. View and share are recorded
    once per user and cannot be removed.
    """

    user_id: str  # User ID from authenticated user
    loop_id: str
    interaction_type: InteractionType
    action: Optional[Literal["add", "remove"]] = None


class InteractResponse(BaseModel):
    """Interact response."""

    success: bool = True
    interaction_type: InteractionType
    action: ToggleAction
    is_active: bool
    count: int
    stats: LoopStatsInfo


class InteractUseCase:
    """Use case for liking, saving, sharing or viewing a loop.

    Counter updates are part of the primary write. The author notification
    and the real-time update are dispatched afterwards and cannot fail the
    interaction.
    """

    def __init__(
        self,
        loop_service: LoopService,
        counter_service: CounterService,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> None:
        """Initialize interact use case.

        Args:
            loop_service: Loop lookups
            counter_service: Interaction and counter writes
            profile_service: Actor names for notifications
            dispatcher: Side-effect dispatcher
        """
        self.loop_service = loop_service
        self.counter_service = counter_service
        self.profile_service = profile_service
        self.dispatcher = dispatcher

    async def execute(self, request: InteractRequest) -> InteractResponse:
        """Execute interaction flow.

        Raises:
            NotFoundError: If the loop does not exist
            ValidationError: If removing a view or share
            ConflictError: If a toggle kept losing races
        """
        user_id = UserId(parse_id(request.user_id, "user_id"))
        loop_id = LoopId(parse_id(request.loop_id, "loop_id"))
        interaction_type = request.interaction_type

        loop = await self.loop_service.get(loop_id)
        result = await self._apply(user_id, loop_id, interaction_type, request.action)

        if result.action == ToggleAction.ADDED:
            await self._notify_author(loop, user_id, interaction_type)

        stats = await self.counter_service.get_stats(loop_id)
        stats_info = LoopStatsInfo.from_stats(stats)

        await self.dispatcher.dispatch(
            Broadcast(
                room=f"loop:{loop_id}",
                event="loop_interaction",
                payload={
                    "loop_id": str(loop_id),
                    "user_id": str(user_id),
                    "interaction_type": interaction_type.value,
                    "action": result.action.value,
                    "stats": stats_info.model_dump(),
                },
            )
        )

        return InteractResponse(
            interaction_type=interaction_type,
            action=result.action,
            is_active=self._is_active(result, request.action),
            count=result.new_count,
            stats=stats_info,
        )

    async def _apply(
        self,
        user_id: UserId,
        loop_id: LoopId,
        interaction_type: InteractionType,
        action: Optional[str],
    ) -> ToggleResult:
        if not interaction_type.is_toggleable:
            if action == "remove":
                raise ValidationError(f"{interaction_type.value} cannot be removed")
            return await self.counter_service.record(user_id, loop_id, interaction_type)

        if action is None:
            return await self.counter_service.toggle(user_id, loop_id, interaction_type)
        return await self.counter_service.set_state(
            user_id, loop_id, interaction_type, active=action == "add"
        )

    async def _notify_author(
        self, loop: Loop, user_id: UserId, interaction_type: InteractionType
    ) -> None:
        # Views are silent, and nobody is notified about their own activity
        if interaction_type == InteractionType.VIEW or loop.author_id == user_id:
            return

        name = await self.profile_service.display_name(user_id)
        await self.dispatcher.dispatch(
            Notify(
                recipient_id=loop.author_id,
                type=NotificationType(interaction_type.value),
                title=f"{name} {interaction_type.value}d your loop",
                message=f"Your loop received a new {interaction_type.value}",
                data={
                    "loop_id": str(loop.id),
                    "user_id": str(user_id),
                    "interaction_type": interaction_type.value,
                },
            )
        )
        logfire.info(
            "Interaction notification dispatched",
            loop_id=str(loop.id),
            interaction_type=interaction_type.value,
        )

    @staticmethod
    def _is_active(result: ToggleResult, action: Optional[str]) -> bool:
        if result.action == ToggleAction.ADDED:
            return True
        if result.action == ToggleAction.REMOVED:
            return False
        # Unchanged: the requested state already held
        return action != "remove"
