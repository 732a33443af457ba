"""Circle routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from loop.application.usecase.circle import (
    CreateCircleRequest,
    CreateCircleResponse,
    CreateCircleUseCase,
    GetCircleRequest,
    GetCircleResponse,
    GetCircleUseCase,
    JoinCircleRequest,
    JoinCircleResponse,
    JoinCircleUseCase,
)
from loop.domain.service import AuthService
from loop.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(prefix="/circles", tags=["circles"], route_class=DishkaRoute)


class CreateCircleAPIRequest(BaseModel):
    """API request for creating a circle."""

    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)


@router.post(
    "", response_model=CreateCircleResponse, status_code=status.HTTP_201_CREATED
)
async def create_circle(
    request: CreateCircleAPIRequest,
    create_circle_use_case: FromDishka[CreateCircleUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreateCircleResponse:
    """Create a circle. The caller becomes its owner and first member."""
    user_id = await require_user_id(auth_service, authorization)
    return await create_circle_use_case.execute(
        CreateCircleRequest(
            owner_id=user_id, name=request.name, description=request.description
        )
    )


@router.post("/{circle_id}/join", response_model=JoinCircleResponse)
async def join_circle(
    circle_id: str,
    join_circle_use_case: FromDishka[JoinCircleUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> JoinCircleResponse:
    """Join a circle. Joining again is a no-op."""
    user_id = await require_user_id(auth_service, authorization)
    return await join_circle_use_case.execute(
        JoinCircleRequest(circle_id=circle_id, user_id=user_id)
    )


@router.get("/{circle_id}", response_model=GetCircleResponse)
async def get_circle(
    circle_id: str,
    get_circle_use_case: FromDishka[GetCircleUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> GetCircleResponse:
    """Get a circle and whether the caller belongs to it."""
    viewer_id = await optional_user_id(auth_service, authorization)
    return await get_circle_use_case.execute(
        GetCircleRequest(circle_id=circle_id, viewer_id=viewer_id)
    )
