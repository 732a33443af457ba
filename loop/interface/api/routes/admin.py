"""Admin routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from loop.application.usecase.admin import (
    SetCapabilitiesRequest,
    SetCapabilitiesResponse,
    SetCapabilitiesUseCase,
)
from loop.domain.service import AuthService
from loop.interface.api.auth import require_user_id

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class SetCapabilitiesAPIRequest(BaseModel):
    """API request for changing a user's capabilities."""

    moderator: bool


@router.patch("/users/{user_id}/capabilities", response_model=SetCapabilitiesResponse)
async def set_capabilities(
    user_id: str,
    request: SetCapabilitiesAPIRequest,
    set_capabilities_use_case: FromDishka[SetCapabilitiesUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> SetCapabilitiesResponse:
    """Grant or revoke moderation rights.

    Requires authentication as a user who can manage users.
    """
    actor_id = await require_user_id(auth_service, authorization)
    return await set_capabilities_use_case.execute(
        SetCapabilitiesRequest(
            actor_id=actor_id, target_user_id=user_id, moderator=request.moderator
        )
    )
