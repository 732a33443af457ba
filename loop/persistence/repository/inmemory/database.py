"""Shared in-memory storage for the in-memory repositories.

All repositories of one test share a single InMemoryDatabase so that
cross-table behaviour (cascading deletes, trending, feeds) matches the
PostgreSQL schema.
"""

from dataclasses import dataclass, field

from loop.domain.model import (
    Circle,
    CircleMember,
    Comment,
    ContentFlag,
    Follow,
    Interaction,
    LiveStream,
    Loop,
    LoopStats,
    Notification,
    OutboxMessage,
    Profile,
)
from loop.domain.value import (
    CircleId,
    CommentId,
    FlagId,
    InteractionType,
    LoopId,
    NotificationId,
    OutboxMessageId,
    StreamId,
    UserId,
)


@dataclass
class InMemoryDatabase:
    """Tables as dictionaries keyed like their primary/unique keys."""

    loops: dict[LoopId, Loop] = field(default_factory=dict)
    stats: dict[LoopId, LoopStats] = field(default_factory=dict)
    interactions: dict[tuple[UserId, LoopId, InteractionType], Interaction] = field(
        default_factory=dict
    )
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    follows: dict[tuple[UserId, UserId], Follow] = field(default_factory=dict)
    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
    profiles: dict[UserId, Profile] = field(default_factory=dict)
    circles: dict[CircleId, Circle] = field(default_factory=dict)
    circle_members: dict[tuple[CircleId, UserId], CircleMember] = field(
        default_factory=dict
    )
    streams: dict[StreamId, LiveStream] = field(default_factory=dict)
    outbox: dict[OutboxMessageId, OutboxMessage] = field(default_factory=dict)
    flags: dict[FlagId, ContentFlag] = field(default_factory=dict)

    def subtree_ids(self, loop_id: LoopId) -> list[LoopId]:
        """IDs of a loop and all its descendants."""
        if loop_id not in self.loops:
            return []

        found = [loop_id]
        frontier = [loop_id]
        while frontier:
            parents = set(frontier)
            frontier = [l.id for l in self.loops.values() if l.parent_id in parents]
            found.extend(frontier)
        return found

    def comment_thread_ids(self, comment_id: CommentId) -> list[CommentId]:
        """IDs of a comment and all replies below it."""
        if comment_id not in self.comments:
            return []

        found = [comment_id]
        frontier = [comment_id]
        while frontier:
            parents = set(frontier)
            frontier = [c.id for c in self.comments.values() if c.parent_id in parents]
            found.extend(frontier)
        return found

    def delete_loops(self, loop_ids: list[LoopId]) -> None:
        """Remove loops and the rows that cascade with them."""
        doomed = set(loop_ids)
        for loop_id in doomed:
            self.loops.pop(loop_id, None)
            self.stats.pop(loop_id, None)
        for key in [k for k in self.interactions if k[1] in doomed]:
            del self.interactions[key]
        for comment_id in [c.id for c in self.comments.values() if c.loop_id in doomed]:
            del self.comments[comment_id]
