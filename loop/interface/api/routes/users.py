"""User routes: follows and profiles."""

from typing import Literal, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel, Field

from loop.application.usecase.user import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from loop.domain.service import AuthService
from loop.domain.value import Username
from loop.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class FollowAPIRequest(BaseModel):
    """API request for following or unfollowing a user."""

    target_user_id: str
    action: Literal["follow", "unfollow"] = "follow"


class UpdateProfileAPIRequest(BaseModel):
    """API request for saving the caller's profile."""

    username: Username
    display_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)


@router.post("/follow", response_model=FollowUserResponse)
async def follow_user(
    request: FollowAPIRequest,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> FollowUserResponse:
    """Follow or unfollow a user.

    Requires authentication. Following twice is a 409, following yourself
    a 400. Unfollowing someone you do not follow reports `changed: false`.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await follow_user_use_case.execute(
        FollowUserRequest(
            follower_id=user_id,
            target_user_id=request.target_user_id,
            action=request.action,
        )
    )


# Declared before /{user_id} so "profile" is not taken for an id
@router.get("/profile", response_model=GetProfileResponse)
async def get_own_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> GetProfileResponse:
    """Get the caller's own profile.

    Requires authentication. 404 until the profile has been saved.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await get_profile_use_case.execute(
        GetProfileRequest(user_id=user_id, viewer_id=user_id)
    )


@router.put("/profile", response_model=UpdateProfileResponse)
async def update_own_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileResponse:
    """Create or update the caller's profile.

    Requires authentication. 409 if the username belongs to someone else.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user_id,
            username=request.username,
            display_name=request.display_name,
            avatar_url=request.avatar_url,
            bio=request.bio,
        )
    )


@router.get("/{user_id}/followers", response_model=ListFollowsResponse)
async def list_followers(
    user_id: str,
    list_followers_use_case: FromDishka[ListFollowersUseCase],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListFollowsResponse:
    """List who follows a user, newest first."""
    return await list_followers_use_case.execute(
        ListFollowsRequest(user_id=user_id, limit=limit, offset=offset)
    )


@router.get("/{user_id}/following", response_model=ListFollowsResponse)
async def list_following(
    user_id: str,
    list_following_use_case: FromDishka[ListFollowingUseCase],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListFollowsResponse:
    """List who a user follows, newest first."""
    return await list_following_use_case.execute(
        ListFollowsRequest(user_id=user_id, limit=limit, offset=offset)
    )


@router.get("/{user_id}", response_model=GetProfileResponse)
async def get_user_profile(
    user_id: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> GetProfileResponse:
    """Get a user's public profile."""
    viewer_id = await optional_user_id(auth_service, authorization)
    return await get_profile_use_case.execute(
        GetProfileRequest(user_id=user_id, viewer_id=viewer_id)
    )
