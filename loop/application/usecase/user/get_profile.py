"""Get user profile use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.user.view import ProfileInfo
from loop.domain.service import FollowService, ProfileService
from loop.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str
    viewer_id: Optional[str] = None


class GetProfileResponse(BaseModel):
    """Get profile response."""

    profile: ProfileInfo
    is_following: bool  # Whether the viewer follows this user


class GetProfileUseCase:
    """Use case for reading a profile."""

    def __init__(
        self, profile_service: ProfileService, follow_service: FollowService
    ) -> None:
        self.profile_service = profile_service
        self.follow_service = follow_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user has no profile
        """
        user_id = UserId(parse_id(request.user_id, "user_id"))
        profile = await self.profile_service.get(user_id)

        is_following = False
        if request.viewer_id:
            viewer_id = UserId(parse_id(request.viewer_id, "viewer_id"))
            if viewer_id != user_id:
                is_following = await self.follow_service.is_following(
                    viewer_id, user_id
                )

        return GetProfileResponse(
            profile=ProfileInfo.from_profile(profile), is_following=is_following
        )
