"""Start or end stream use case."""

from typing import Literal

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.stream.view import StreamInfo
from loop.domain.service import StreamService
from loop.domain.value import StreamId, UserId


class StreamNotificationRequest(BaseModel):
    """Stream lifecycle request."""

    requester_id: str  # User ID from authenticated user
    stream_id: str
    action: Literal["start", "end"]


class StreamNotificationResponse(BaseModel):
    """Stream lifecycle response."""

    success: bool
    stream: StreamInfo
    notified_followers: int  # 0 when ending


class StreamNotificationUseCase:
    """Use case for going live (notifying followers) and ending a stream."""

    def __init__(self, stream_service: StreamService) -> None:
        self.stream_service = stream_service

    async def execute(
        self, request: StreamNotificationRequest
    ) -> StreamNotificationResponse:
        """Execute stream lifecycle flow.

        Raises:
            NotFoundError: If the stream does not exist
            ForbiddenError: If the requester is not the streamer
            ValidationError: If starting a stream that is already live
        """
        stream_id = StreamId(parse_id(request.stream_id, "stream_id"))
        requester_id = UserId(parse_id(request.requester_id, "requester_id"))

        if request.action == "start":
            notified = await self.stream_service.start(stream_id, requester_id)
            stream = await self.stream_service.get(stream_id)
        else:
            notified = 0
            stream = await self.stream_service.end(stream_id, requester_id)

        return StreamNotificationResponse(
            success=True,
            stream=StreamInfo.from_stream(stream),
            notified_followers=notified,
        )
