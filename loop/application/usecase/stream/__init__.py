"""Live stream use cases."""

from loop.application.usecase.stream.create_stream import (
    CreateStreamRequest,
    CreateStreamResponse,
    CreateStreamUseCase,
)
from loop.application.usecase.stream.stream_notification import (
    StreamNotificationRequest,
    StreamNotificationResponse,
    StreamNotificationUseCase,
)
from loop.application.usecase.stream.view import StreamInfo

__all__ = [
    "CreateStreamRequest",
    "CreateStreamResponse",
    "CreateStreamUseCase",
    "StreamNotificationRequest",
    "StreamNotificationResponse",
    "StreamNotificationUseCase",
    "StreamInfo",
]
