"""Follow relationship."""

from datetime import datetime

from pydantic import Field, model_validator

from loop.domain.model.common import DomainModel
from loop.domain.value import FollowId, UserId


class Follow(DomainModel):
    """A directed follow edge between two users."""

    id: FollowId
    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_not_self(self) -> "Follow":
        if self.follower_id == self.following_id:
            raise ValueError("Users cannot follow themselves")
        return self
