"""Content flag entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import FlagId, FlagReason, FlagStatus, FlagTarget, UserId


class ContentFlag(DomainModel):
    """A user's report about a loop, comment or user.

    Flags start `pending`. A moderator closes them as `resolved` (action was
    taken) or `dismissed` (nothing wrong), recording who reviewed and when.
    """

    id: FlagId
    target_type: FlagTarget
    target_id: UUID
    reporter_id: UserId
    reason: FlagReason
    description: str = Field(default="", max_length=1000)
    status: FlagStatus = FlagStatus.PENDING
    moderator_id: Optional[UserId] = None
    moderator_notes: Optional[str] = Field(default=None, max_length=1000)
    action_taken: Optional[str] = Field(default=None, max_length=100)
    created_at: datetime = Field(default_factory=datetime.now)
    reviewed_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.status == FlagStatus.PENDING
