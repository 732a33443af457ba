"""Response models for user use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from loop.domain.model import Profile


class ProfileInfo(BaseModel):
    """Profile as returned by the API."""

    id: str
    username: str
    display_name: Optional[str]
    avatar_url: Optional[str]
    bio: Optional[str]
    is_admin: bool
    is_moderator: bool
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileInfo":
        return cls(
            id=str(profile.id),
            username=profile.username.root,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            is_admin=profile.is_admin,
            is_moderator=profile.is_moderator,
            created_at=profile.created_at,
        )
