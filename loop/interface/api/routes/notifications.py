"""Notification routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel

from loop.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from loop.domain.service import AuthService
from loop.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(BaseModel):
    """API request for marking notifications read.

    Omit `notification_ids` to mark every notification read.
    """

    notification_ids: Optional[list[str]] = None


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    auth_service: FromDishka[AuthService],
    unread_only: bool = False,
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first.

    Requires authentication.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user_id, unread_only=unread_only, limit=limit, offset=offset
        )
    )


@router.patch("", response_model=MarkReadResponse)
async def mark_notifications_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> MarkReadResponse:
    """Mark the caller's notifications read.

    Requires authentication. Ids of other users' notifications are ignored.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await mark_read_use_case.execute(
        MarkReadRequest(user_id=user_id, notification_ids=request.notification_ids)
    )
