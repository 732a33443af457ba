"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from loop.domain.model import (
    Circle,
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
    FlagReason,
    FlagStatus,
    FlagTarget,
    FollowId,
    InteractionId,
    InteractionType,
    LoopId,
    NotificationId,
    NotificationType,
    OutboxMessageId,
    OutboxStatus,
    StreamId,
    UserId,
    Username,
    Visibility,
    parse_content,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_loop(row: Dict[str, Any]) -> Loop:
    """Convert database row to Loop domain model.

    Args:
        row: Database row as dict

    Returns:
        Loop domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    circle_id = _optional_uuid(row.get("circle_id"))
    return Loop(
        id=LoopId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        parent_id=LoopId(parent_id) if parent_id else None,
        depth=row["depth"],
        content=parse_content(row["content"]),
        circle_id=CircleId(circle_id) if circle_id else None,
        visibility=Visibility(row["visibility"]),
        created_at=row["created_at"],
    )


def loop_to_dict(loop: Loop) -> Dict[str, Any]:
    """Convert Loop domain model to database dict.

    Content is stored as JSONB, so it is dumped in JSON mode.
    """
    return {
        "id": loop.id,
        "author_id": loop.author_id,
        "parent_id": loop.parent_id,
        "depth": loop.depth,
        "content": loop.content.model_dump(mode="json", exclude_none=True),
        "circle_id": loop.circle_id,
        "visibility": loop.visibility.value,
        "created_at": loop.created_at,
    }


def row_to_stats(row: Dict[str, Any]) -> LoopStats:
    """Convert database row to LoopStats domain model."""
    return LoopStats(
        loop_id=LoopId(_uuid(row["loop_id"])),
        likes=row["likes"],
        branches=row["branches"],
        comments=row["comments"],
        saves=row["saves"],
        views=row["views"],
        shares=row["shares"],
    )


def row_to_interaction(row: Dict[str, Any]) -> Interaction:
    """Convert database row to Interaction domain model."""
    return Interaction(
        id=InteractionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        loop_id=LoopId(_uuid(row["loop_id"])),
        interaction_type=InteractionType(row["interaction_type"]),
        created_at=row["created_at"],
    )


def interaction_to_dict(interaction: Interaction) -> Dict[str, Any]:
    """Convert Interaction domain model to database dict."""
    return {
        "id": interaction.id,
        "user_id": interaction.user_id,
        "loop_id": interaction.loop_id,
        "interaction_type": interaction.interaction_type.value,
        "created_at": interaction.created_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        data=row.get("data") or {},
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "type": notification.type.value,
        "title": notification.title,
        "message": notification.message,
        "data": notification.data,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
    }


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(_uuid(row["id"])),
        follower_id=UserId(_uuid(row["follower_id"])),
        following_id=UserId(_uuid(row["following_id"])),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        loop_id=LoopId(_uuid(row["loop_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=row["created_at"],
    )


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        is_admin=row["is_admin"],
        is_moderator=row["is_moderator"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return {
        "id": profile.id,
        "username": profile.username.root,
        "display_name": profile.display_name,
        "avatar_url": profile.avatar_url,
        "bio": profile.bio,
        "is_admin": profile.is_admin,
        "is_moderator": profile.is_moderator,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }


def row_to_circle(row: Dict[str, Any]) -> Circle:
    """Convert database row (with member_count) to Circle domain model."""
    return Circle(
        id=CircleId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        owner_id=UserId(_uuid(row["owner_id"])),
        member_count=row.get("member_count", 0),
        created_at=row["created_at"],
    )


def row_to_stream(row: Dict[str, Any]) -> LiveStream:
    """Convert database row to LiveStream domain model."""
    return LiveStream(
        id=StreamId(_uuid(row["id"])),
        streamer_id=UserId(_uuid(row["streamer_id"])),
        title=row["title"],
        category=row.get("category"),
        is_live=row["is_live"],
        started_at=row.get("started_at"),
        ended_at=row.get("ended_at"),
        created_at=row["created_at"],
    )


def row_to_outbox_message(row: Dict[str, Any]) -> OutboxMessage:
    """Convert database row to OutboxMessage domain model."""
    return OutboxMessage(
        id=OutboxMessageId(_uuid(row["id"])),
        kind=row["kind"],
        payload=row["payload"],
        status=OutboxStatus(row["status"]),
        attempts=row["attempts"],
        last_error=row.get("last_error"),
        created_at=row["created_at"],
        processed_at=row.get("processed_at"),
    )


def row_to_flag(row: Dict[str, Any]) -> ContentFlag:
    """Convert database row to ContentFlag domain model."""
    moderator_id = _optional_uuid(row.get("moderator_id"))
    return ContentFlag(
        id=FlagId(_uuid(row["id"])),
        target_type=FlagTarget(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason=FlagReason(row["reason"]),
        description=row.get("description") or "",
        status=FlagStatus(row["status"]),
        moderator_id=UserId(moderator_id) if moderator_id else None,
        moderator_notes=row.get("moderator_notes"),
        action_taken=row.get("action_taken"),
        created_at=row["created_at"],
        reviewed_at=row.get("reviewed_at"),
    )


def flag_to_dict(flag: ContentFlag) -> Dict[str, Any]:
    """Convert ContentFlag domain model to database dict."""
    values = flag.model_dump()
    values["target_type"] = flag.target_type.value
    values["reason"] = flag.reason.value
    values["status"] = flag.status.value
    return values
