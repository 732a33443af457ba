"""Moderation use cases."""

from loop.application.usecase.moderation.create_flag import (
    CreateFlagRequest,
    CreateFlagResponse,
    CreateFlagUseCase,
)
from loop.application.usecase.moderation.list_flags import (
    GetFlagRequest,
    GetFlagUseCase,
    ListFlagsRequest,
    ListFlagsResponse,
    ListFlagsUseCase,
)
from loop.application.usecase.moderation.resolve_flag import (
    ResolveFlagRequest,
    ResolveFlagResponse,
    ResolveFlagUseCase,
)
from loop.application.usecase.moderation.view import FlagInfo

__all__ = [
    "CreateFlagRequest",
    "CreateFlagResponse",
    "CreateFlagUseCase",
    "GetFlagRequest",
    "GetFlagUseCase",
    "ListFlagsRequest",
    "ListFlagsResponse",
    "ListFlagsUseCase",
    "ResolveFlagRequest",
    "ResolveFlagResponse",
    "ResolveFlagUseCase",
    "FlagInfo",
]
