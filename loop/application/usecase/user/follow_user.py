"""Follow user use case."""

from typing import Literal

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.domain.service import FollowService
from loop.domain.value import UserId


class FollowUserRequest(BaseModel):
    """Follow or unfollow request."""

    follower_id: str  # User ID from authenticated user
    target_user_id: str
    action: Literal["follow", "unfollow"] = "follow"


class FollowUserResponse(BaseModel):
    """Follow or unfollow response."""

    success: bool
    action: Literal["follow", "unfollow"]
    is_following: bool
    changed: bool  # False when unfollowing someone not followed


class FollowUserUseCase:
    """Use case for following and unfollowing users."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize follow user use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow flow.

        Raises:
            ValidationError: If following yourself
            ConflictError: If already following
        """
        follower_id = UserId(parse_id(request.follower_id, "follower_id"))
        target_id = UserId(parse_id(request.target_user_id, "target_user_id"))

        if request.action == "follow":
            await self.follow_service.follow(follower_id, target_id)
            return FollowUserResponse(
                success=True, action="follow", is_following=True, changed=True
            )

        removed = await self.follow_service.unfollow(follower_id, target_id)
        return FollowUserResponse(
            success=True, action="unfollow", is_following=False, changed=removed
        )
