"""Notification domain service."""

from datetime import datetime
from typing import Any, Optional, Sequence
from uuid import uuid4

import logfire

from loop.domain.model.notification import Notification
from loop.domain.repository import NotificationRepository
from loop.domain.value import NotificationId, NotificationType, UserId

from .base import Service

PREVIEW_LENGTH = 100


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Shorten user text for a notification message."""
    if len(text) <= length:
        return text
    return text[:length] + "..."


class NotificationService(Service):
    """Domain service for writing and reading notifications.

    Writers normally go through the side-effect dispatcher so that a failed
    insert never fails the action that triggered it.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self,
        recipient_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        data: Optional[dict[str, Any]] = None,
    ) -> NotificationId:
        """Deliver one notification.

        Args:
            recipient_id: Recipient user ID
            type: Notification type
            title: Short headline
            message: Body text
            data: Extra structured payload (loop_id, user_id, ...)

        Returns:
            ID of the stored notification
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            type=type.value,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                type=type,
                title=title,
                message=message,
                data=data or {},
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            return saved.id

    async def notify_many(
        self,
        recipient_ids: Sequence[UserId],
        type: NotificationType,
        title: str,
        message: str,
        data: Optional[dict[str, Any]] = None,
    ) -> int:
        """Deliver the same notification to many recipients in one batch.

        Duplicate recipients receive a single notification.

        Returns:
            Number of notifications stored
        """
        unique_ids = list(dict.fromkeys(recipient_ids))
        if not unique_ids:
            return 0

        with logfire.span(
            "notification_service.notify_many",
            recipients=len(unique_ids),
            type=type.value,
        ):
            now = datetime.now()
            notifications = [
                Notification(
                    id=NotificationId(uuid4()),
                    recipient_id=recipient_id,
                    type=type,
                    title=title,
                    message=message,
                    data=data or {},
                    created_at=now,
                )
                for recipient_id in unique_ids
            ]
            count = await self.notification_repository.save_many(notifications)
            logfire.info("Notifications fanned out", count=count, type=type.value)
            return count

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        return await self.notification_repository.find_by_recipient(
            recipient_id, unread_only=unread_only, limit=limit, offset=offset
        )

    async def count_unread(self, recipient_id: UserId) -> int:
        return await self.notification_repository.count_unread(recipient_id)

    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        """Mark notifications read for their recipient.

        Args:
            recipient_id: Recipient user ID
            notification_ids: IDs to mark (None marks every unread one)

        Returns:
            Number of notifications updated
        """
        if notification_ids is not None and not notification_ids:
            return 0

        with logfire.span(
            "notification_service.mark_read", recipient_id=str(recipient_id)
        ):
            return await self.notification_repository.mark_read(
                recipient_id, notification_ids
            )
