"""Auth routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from loop.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated user with their profile and capabilities.

    Requires authentication.
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(authorization=authorization)
    )
