"""Create stream use case."""

from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.stream.view import StreamInfo
from loop.domain.service import StreamService
from loop.domain.value import UserId


class CreateStreamRequest(BaseModel):
    """Create stream request."""

    streamer_id: str  # User ID from authenticated user
    title: str = Field(min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, max_length=50)


class CreateStreamResponse(BaseModel):
    """Create stream response."""

    stream: StreamInfo


class CreateStreamUseCase:
    """Use case for creating a live stream (not yet live)."""

    def __init__(self, stream_service: StreamService) -> None:
        self.stream_service = stream_service

    async def execute(self, request: CreateStreamRequest) -> CreateStreamResponse:
        stream = await self.stream_service.create(
            UserId(parse_id(request.streamer_id, "streamer_id")),
            request.title,
            request.category,
        )
        return CreateStreamResponse(stream=StreamInfo.from_stream(stream))
