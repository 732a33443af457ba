"""Domain value types for Loop.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from loop.domain.value.common import RootValueObject, ValueObject


class InteractionType(str, Enum):
    """Kind of per-user interaction with a loop."""

    LIKE = "like"
    SAVE = "save"
    SHARE = "share"
    VIEW = "view"

    @property
    def is_toggleable(self) -> bool:
        """Like and save flip between present and absent."""
        return self in (InteractionType.LIKE, InteractionType.SAVE)

    @property
    def counter(self) -> "CounterName":
        """Counter that tracks this interaction type."""
        return _INTERACTION_COUNTERS[self]


class CounterName(str, Enum):
    """Denormalized counters kept per loop."""

    LIKES = "likes"
    BRANCHES = "branches"
    COMMENTS = "comments"
    SAVES = "saves"
    VIEWS = "views"
    SHARES = "shares"


_INTERACTION_COUNTERS = {
    InteractionType.LIKE: CounterName.LIKES,
    InteractionType.SAVE: CounterName.SAVES,
    InteractionType.SHARE: CounterName.SHARES,
    InteractionType.VIEW: CounterName.VIEWS,
}


class ToggleAction(str, Enum):
    """Outcome of an interaction write."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class Visibility(str, Enum):
    """Who can see a loop in feeds."""

    PUBLIC = "public"
    PRIVATE = "private"


class FeedMode(str, Enum):
    """Feed composition modes."""

    FOLLOWING = "following"
    PERSONALIZED = "personalized"
    TRENDING = "trending"
    RECENT = "recent"


class NotificationType(str, Enum):
    """Kinds of notifications produced by fan-out."""

    FOLLOW = "follow"
    LIKE = "like"
    SAVE = "save"
    SHARE = "share"
    BRANCH = "branch"
    COMMENT = "comment"
    REPLY = "reply"
    LIVE_STREAM_STARTED = "live_stream_started"


class Capability(str, Enum):
    """Capabilities checked before privileged operations."""

    MODERATE_CONTENT = "moderate_content"
    MANAGE_USERS = "manage_users"


class FlagTarget(str, Enum):
    """Kind of content a flag points at."""

    LOOP = "loop"
    COMMENT = "comment"
    USER = "user"


class FlagReason(str, Enum):
    """Why content was reported."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    INAPPROPRIATE = "inappropriate"
    COPYRIGHT = "copyright"
    OTHER = "other"


class FlagStatus(str, Enum):
    """Review state of a flag."""

    PENDING = "pending"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class SearchScope(str, Enum):
    """What a search looks through."""

    ALL = "all"
    LOOPS = "loops"
    USERS = "users"


class CircleRole(str, Enum):
    """Role of a member inside a circle."""

    OWNER = "owner"
    MEMBER = "member"


class MediaKind(str, Enum):
    """Media families accepted by the media store."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_content_type(cls, content_type: str | None) -> "MediaKind":
        """Classify an uploaded file by its MIME type."""
        content_type = content_type or ""
        if content_type.startswith("image/"):
            return cls.IMAGE
        if content_type.startswith("video/"):
            return cls.VIDEO
        if content_type.startswith("audio/"):
            return cls.AUDIO
        return cls.FILE


class OutboxStatus(str, Enum):
    """Lifecycle of a side effect kept for replay."""

    PENDING = "pending"
    FAILED = "failed"
    DONE = "done"


class Username(RootValueObject[str]):
    """Public username.

    3-30 characters: lowercase letters, digits, underscores and dots.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[a-z0-9_.]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters: lowercase letters, digits, '_' or '.'"
            )
        return v


class TrendingWeights(ValueObject):
    """Weight of each activity signal in the trending score."""

    like: float = 1.0
    save: float = 2.0
    share: float = 3.0
    view: float = 0.1
    branch: float = 4.0
    comment: float = 2.0

    def for_interaction(self, interaction_type: InteractionType) -> float:
        return getattr(self, interaction_type.value)
