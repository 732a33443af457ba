"""Update own profile use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.user.view import ProfileInfo
from loop.domain.service import ProfileService
from loop.domain.value import UserId, Username


class UpdateProfileRequest(BaseModel):
    """Update profile request. Creates the profile on first use."""

    user_id: str  # User ID from authenticated user
    username: Username
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    profile: ProfileInfo


class UpdateProfileUseCase:
    """Use case for creating or updating the caller's profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            ConflictError: If the username belongs to someone else
        """
        profile = await self.profile_service.upsert(
            UserId(parse_id(request.user_id, "user_id")),
            request.username,
            display_name=request.display_name,
            avatar_url=request.avatar_url,
            bio=request.bio,
        )
        return UpdateProfileResponse(profile=ProfileInfo.from_profile(profile))
