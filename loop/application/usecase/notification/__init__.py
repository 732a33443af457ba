"""Notification use cases."""

from loop.application.usecase.notification.list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from loop.application.usecase.notification.mark_read import (
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "NotificationItem",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
]
