"""Circle use cases."""

from loop.application.usecase.circle.create_circle import (
    CreateCircleRequest,
    CreateCircleResponse,
    CreateCircleUseCase,
)
from loop.application.usecase.circle.get_circle import (
    GetCircleRequest,
    GetCircleResponse,
    GetCircleUseCase,
)
from loop.application.usecase.circle.join_circle import (
    JoinCircleRequest,
    JoinCircleResponse,
    JoinCircleUseCase,
)
from loop.application.usecase.circle.view import CircleInfo

__all__ = [
    "CreateCircleRequest",
    "CreateCircleResponse",
    "CreateCircleUseCase",
    "JoinCircleRequest",
    "JoinCircleResponse",
    "JoinCircleUseCase",
    "GetCircleRequest",
    "GetCircleResponse",
    "GetCircleUseCase",
    "CircleInfo",
]
