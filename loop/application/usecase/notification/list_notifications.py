"""List notifications use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.domain.model import Notification
from loop.domain.service import NotificationService
from loop.domain.value import NotificationType, UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user
    unread_only: bool = False
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class NotificationItem(BaseModel):
    """Notification as returned by the API."""

    id: str
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any]
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            id=str(notification.id),
            type=notification.type,
            title=notification.title,
            message=notification.message,
            data=notification.data,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user_id = UserId(parse_id(request.user_id, "user_id"))

        notifications = await self.notification_service.list_for_recipient(
            user_id,
            unread_only=request.unread_only,
            limit=request.limit,
            offset=request.offset,
        )
        unread = await self.notification_service.count_unread(user_id)

        return ListNotificationsResponse(
            notifications=[NotificationItem.from_notification(n) for n in notifications],
            unread_count=unread,
        )
