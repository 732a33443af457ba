"""Domain value objects for Loop."""

from loop.domain.value.content import (
    AudioContent,
    FileContent,
    ImageContent,
    SEARCHABLE_FIELDS,
    LoopContent,
    TextContent,
    VideoContent,
    parse_content,
    searchable_text,
)
from loop.domain.value.identifiers import (
    CircleId,
    CommentId,
    FlagId,
    FollowId,
    InteractionId,
    LoopId,
    NotificationId,
    OutboxMessageId,
    StreamId,
    UserId,
)
from loop.domain.value.types import (
    Capability,
    CircleRole,
    CounterName,
    FeedMode,
    FlagReason,
    FlagStatus,
    FlagTarget,
    InteractionType,
    MediaKind,
    NotificationType,
    OutboxStatus,
    SearchScope,
    ToggleAction,
    TrendingWeights,
    Username,
    Visibility,
)

__all__ = [
    # Identifiers
    "UserId",
    "LoopId",
    "InteractionId",
    "CommentId",
    "NotificationId",
    "FollowId",
    "CircleId",
    "StreamId",
    "OutboxMessageId",
    "FlagId",
    # Content
    "LoopContent",
    "TextContent",
    "ImageContent",
    "VideoContent",
    "AudioContent",
    "FileContent",
    "parse_content",
    "SEARCHABLE_FIELDS",
    "searchable_text",
    # Types
    "Capability",
    "CircleRole",
    "CounterName",
    "FeedMode",
    "FlagReason",
    "FlagStatus",
    "FlagTarget",
    "InteractionType",
    "MediaKind",
    "NotificationType",
    "OutboxStatus",
    "SearchScope",
    "ToggleAction",
    "TrendingWeights",
    "Username",
    "Visibility",
]
