"""Strongly typed identifiers for Loop domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
LoopId = NewType("LoopId", UUID)
InteractionId = NewType("InteractionId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
FollowId = NewType("FollowId", UUID)
CircleId = NewType("CircleId", UUID)
StreamId = NewType("StreamId", UUID)
OutboxMessageId = NewType("OutboxMessageId", UUID)
FlagId = NewType("FlagId", UUID)
