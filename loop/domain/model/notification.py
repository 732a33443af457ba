"""Notification entity."""

from datetime import datetime
from typing import Any

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """A message delivered to one recipient.

    Notifications are written by fan-out and only ever read or marked
    read by their recipient.
    """

    id: NotificationId
    recipient_id: UserId
    type: NotificationType
    title: str = Field(max_length=200)
    message: str = Field(max_length=500)
    data: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
