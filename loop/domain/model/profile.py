"""Profile entity.

Profiles share their id with the auth provider's user id. A user without a
profile row holds no capabilities.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import UserId, Username


class Profile(DomainModel):
    """Public profile of a user."""

    id: UserId
    username: Username
    display_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    is_admin: bool = False
    is_moderator: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def name(self) -> str:
        """Name shown in notification titles."""
        return self.display_name or self.username.root
