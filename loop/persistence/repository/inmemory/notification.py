"""In-memory notification repository for testing."""

from typing import Optional, Sequence

from loop.domain.model import Notification
from loop.domain.repository import NotificationRepository
from loop.domain.value import NotificationId, UserId

from .database import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db
        # Number of save/save_many calls, lets tests assert batching
        self.write_calls = 0

    async def save(self, notification: Notification) -> Notification:
        self.write_calls += 1
        self.db.notifications[notification.id] = notification
        return notification

    async def save_many(self, notifications: Sequence[Notification]) -> int:
        self.write_calls += 1
        for notification in notifications:
            self.db.notifications[notification.id] = notification
        return len(notifications)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        found = [
            n
            for n in self.db.notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]
        found.sort(key=lambda n: n.created_at, reverse=True)
        return found[offset : offset + limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        return sum(
            1
            for n in self.db.notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )

    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        wanted = set(notification_ids) if notification_ids is not None else None
        updated = 0
        for notification in list(self.db.notifications.values()):
            if notification.recipient_id != recipient_id or notification.is_read:
                continue
            if wanted is not None and notification.id not in wanted:
                continue
            self.db.notifications[notification.id] = notification.model_copy(
                update={"is_read": True}
            )
            updated += 1
        return updated
