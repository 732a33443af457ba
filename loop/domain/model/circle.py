"""Circle aggregate: a community that scopes loops to its members."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import CircleId, CircleRole, UserId


class Circle(DomainModel):
    """Circle aggregate root."""

    id: CircleId
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    owner_id: UserId
    member_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)


class CircleMember(DomainModel):
    """Membership of a user in a circle."""

    circle_id: CircleId
    user_id: UserId
    role: CircleRole = CircleRole.MEMBER
    joined_at: datetime = Field(default_factory=datetime.now)
