"""Live stream routes."""

from typing import Literal, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from loop.application.usecase.stream import (
    CreateStreamRequest,
    CreateStreamResponse,
    CreateStreamUseCase,
    StreamNotificationRequest,
    StreamNotificationResponse,
    StreamNotificationUseCase,
)
from loop.domain.service import AuthService
from loop.interface.api.auth import require_user_id

router = APIRouter(prefix="/streams", tags=["streams"], route_class=DishkaRoute)


class CreateStreamAPIRequest(BaseModel):
    """API request for creating a stream."""

    title: str = Field(min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, max_length=50)


class StreamNotificationAPIRequest(BaseModel):
    """API request for starting or ending a stream."""

    stream_id: str
    action: Literal["start", "end"]


@router.post(
    "", response_model=CreateStreamResponse, status_code=status.HTTP_201_CREATED
)
async def create_stream(
    request: CreateStreamAPIRequest,
    create_stream_use_case: FromDishka[CreateStreamUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreateStreamResponse:
    """Create a stream owned by the caller. It is not live yet."""
    user_id = await require_user_id(auth_service, authorization)
    return await create_stream_use_case.execute(
        CreateStreamRequest(
            streamer_id=user_id, title=request.title, category=request.category
        )
    )


@router.post("/notifications", response_model=StreamNotificationResponse)
async def stream_notification(
    request: StreamNotificationAPIRequest,
    stream_notification_use_case: FromDishka[StreamNotificationUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> StreamNotificationResponse:
    """Start or end a stream.

    Starting notifies every follower of the streamer and broadcasts
    `live_stream_started`. Only the streamer may start or end a stream.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await stream_notification_use_case.execute(
        StreamNotificationRequest(
            requester_id=user_id, stream_id=request.stream_id, action=request.action
        )
    )
