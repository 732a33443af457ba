"""Response models for moderation use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from loop.domain.model import ContentFlag
from loop.domain.value import FlagReason, FlagStatus, FlagTarget


class FlagInfo(BaseModel):
    """Content flag as returned by the API."""

    id: str
    target_type: FlagTarget
    target_id: str
    reporter_id: str
    reason: FlagReason
    description: str
    status: FlagStatus
    moderator_id: Optional[str]
    moderator_notes: Optional[str]
    action_taken: Optional[str]
    created_at: datetime
    reviewed_at: Optional[datetime]

    @classmethod
    def from_flag(cls, flag: ContentFlag) -> "FlagInfo":
        return cls(
            id=str(flag.id),
            target_type=flag.target_type,
            target_id=str(flag.target_id),
            reporter_id=str(flag.reporter_id),
            reason=flag.reason,
            description=flag.description,
            status=flag.status,
            moderator_id=str(flag.moderator_id) if flag.moderator_id else None,
            moderator_notes=flag.moderator_notes,
            action_taken=flag.action_taken,
            created_at=flag.created_at,
            reviewed_at=flag.reviewed_at,
        )
