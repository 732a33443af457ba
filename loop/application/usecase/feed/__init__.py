"""Feed use cases."""

from loop.application.usecase.feed.get_feed import (
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
    PaginationInfo,
)

__all__ = [
    "GetFeedRequest",
    "GetFeedResponse",
    "GetFeedUseCase",
    "PaginationInfo",
]
