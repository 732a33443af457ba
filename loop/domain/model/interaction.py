"""Interaction entity and related results.

An interaction records that a user liked, saved, viewed or shared a loop.
There is at most one interaction per (user, loop, type).
"""

from datetime import datetime

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import InteractionId, InteractionType, LoopId, ToggleAction, UserId


class Interaction(DomainModel):
    """Interaction entity."""

    id: InteractionId
    user_id: UserId
    loop_id: LoopId
    interaction_type: InteractionType
    created_at: datetime = Field(default_factory=datetime.now)


class ToggleResult(DomainModel):
    """Outcome of an interaction write and the counter value after it."""

    action: ToggleAction
    new_count: int = Field(ge=0)

    @property
    def changed(self) -> bool:
        return self.action != ToggleAction.UNCHANGED


class ViewerState(DomainModel):
    """What the current viewer has done to a loop."""

    is_liked: bool = False
    is_saved: bool = False
    has_viewed: bool = False
    has_shared: bool = False

    @classmethod
    def from_types(cls, types: set[InteractionType]) -> "ViewerState":
        return cls(
            is_liked=InteractionType.LIKE in types,
            is_saved=InteractionType.SAVE in types,
            has_viewed=InteractionType.VIEW in types,
            has_shared=InteractionType.SHARE in types,
        )
