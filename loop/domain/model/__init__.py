"""Domain model entities for Loop."""

from loop.domain.model.circle import Circle, CircleMember
from loop.domain.model.comment import Comment, CommentThread
from loop.domain.model.feed import FeedPage, LoopView
from loop.domain.model.flag import ContentFlag
from loop.domain.model.follow import Follow
from loop.domain.model.interaction import Interaction, ToggleResult, ViewerState
from loop.domain.model.loop import MAX_BRANCH_DEPTH, Loop
from loop.domain.model.media import MediaUpload
from loop.domain.model.notification import Notification
from loop.domain.model.outbox import OutboxMessage
from loop.domain.model.profile import Profile
from loop.domain.model.side_effect import (
    AdjustCounter,
    Broadcast,
    Notify,
    NotifyMany,
    SideEffect,
)
from loop.domain.model.stats import LoopStats
from loop.domain.model.stream import LiveStream

__all__ = [
    "MAX_BRANCH_DEPTH",
    "Loop",
    "LoopStats",
    "Interaction",
    "ToggleResult",
    "ViewerState",
    "LoopView",
    "FeedPage",
    "Notification",
    "Follow",
    "Comment",
    "CommentThread",
    "Profile",
    "Circle",
    "CircleMember",
    "LiveStream",
    "MediaUpload",
    "OutboxMessage",
    "ContentFlag",
    "SideEffect",
    "AdjustCounter",
    "Notify",
    "NotifyMany",
    "Broadcast",
]
