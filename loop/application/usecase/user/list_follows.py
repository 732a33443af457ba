"""List followers and following use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.user.view import ProfileInfo
from loop.domain.service import FollowService, ProfileService
from loop.domain.value import UserId


class ListFollowsRequest(BaseModel):
    """Request for either side of a user's follow graph."""

    user_id: str
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class FollowItem(BaseModel):
    """The other user of a follow edge."""

    user_id: str
    followed_at: datetime
    profile: Optional[ProfileInfo] = None


class ListFollowsResponse(BaseModel):
    """List of follow edges."""

    users: list[FollowItem]
    total: int


class _ListFollowsUseCase:
    def __init__(
        self, follow_service: FollowService, profile_service: ProfileService
    ) -> None:
        self.follow_service = follow_service
        self.profile_service = profile_service

    async def _items(
        self, user_ids: list[UserId], times: list[datetime]
    ) -> ListFollowsResponse:
        profiles = await self.profile_service.get_many(user_ids)
        users = [
            FollowItem(
                user_id=str(user_id),
                followed_at=followed_at,
                profile=(
                    ProfileInfo.from_profile(profiles[user_id])
                    if user_id in profiles
                    else None
                ),
            )
            for user_id, followed_at in zip(user_ids, times)
        ]
        return ListFollowsResponse(users=users, total=len(users))


class ListFollowersUseCase(_ListFollowsUseCase):
    """Use case for listing who follows a user."""

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        follows = await self.follow_service.followers(
            UserId(parse_id(request.user_id, "user_id")),
            limit=request.limit,
            offset=request.offset,
        )
        return await self._items(
            [f.follower_id for f in follows], [f.created_at for f in follows]
        )


class ListFollowingUseCase(_ListFollowsUseCase):
    """Use case for listing who a user follows."""

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        follows = await self.follow_service.following(
            UserId(parse_id(request.user_id, "user_id")),
            limit=request.limit,
            offset=request.offset,
        )
        return await self._items(
            [f.following_id for f in follows], [f.created_at for f in follows]
        )
