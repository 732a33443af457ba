"""Mark notifications read use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.domain.service import NotificationService
from loop.domain.value import NotificationId, UserId


class MarkReadRequest(BaseModel):
    """Mark read request."""

    user_id: str  # User ID from authenticated user
    notification_ids: Optional[list[str]] = None  # None marks everything read


class MarkReadResponse(BaseModel):
    """Mark read response."""

    success: bool
    updated: int


class MarkReadUseCase:
    """Use case for marking the caller's notifications read.

    Ids that belong to other users are ignored.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        user_id = UserId(parse_id(request.user_id, "user_id"))
        ids = (
            [NotificationId(parse_id(i, "notification_id")) for i in request.notification_ids]
            if request.notification_ids is not None
            else None
        )

        updated = await self.notification_service.mark_read(user_id, ids)
        return MarkReadResponse(success=True, updated=updated)
