"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from loop.domain.model.notification import Notification
from loop.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        pass

    @abstractmethod
    async def save_many(self, notifications: Sequence[Notification]) -> int:
        """Insert many notifications in one multi-row statement.

        Args:
            notifications: Notifications to insert

        Returns:
            Number of rows inserted
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first.

        Args:
            recipient_id: Recipient user ID
            unread_only: Skip notifications already read
            limit: Maximum number to return
            offset: Number to skip

        Returns:
            Notifications of the recipient
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count unread notifications of a recipient."""
        pass

    @abstractmethod
    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        """Mark notifications read.

        Only rows owned by the recipient are touched.

        Args:
            recipient_id: Recipient user ID
            notification_ids: IDs to mark (None marks all unread)

        Returns:
            Number of rows updated
        """
        pass
