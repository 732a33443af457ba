"""User use cases."""

from loop.application.usecase.user.follow_user import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
)
from loop.application.usecase.user.get_profile import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
)
from loop.application.usecase.user.list_follows import (
    FollowItem,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
)
from loop.application.usecase.user.update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from loop.application.usecase.user.view import ProfileInfo

__all__ = [
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "ListFollowersUseCase",
    "ListFollowingUseCase",
    "FollowItem",
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
    "ProfileInfo",
]
