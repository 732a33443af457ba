"""Loop interaction routes."""

from typing import Literal, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import AliasChoices, BaseModel, Field

from loop.application.usecase.interaction import (
    GetInteractionsRequest,
    GetInteractionsResponse,
    GetInteractionsUseCase,
    InteractRequest,
    InteractResponse,
    InteractUseCase,
)
from loop.domain.service import AuthService
from loop.domain.value import InteractionType
from loop.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(prefix="/loops", tags=["interactions"], route_class=DishkaRoute)


class InteractAPIRequest(BaseModel):
    """API request for an interaction.

    Accepts `type` or, for older clients, `interaction_type`.
    """

    type: InteractionType = Field(
        validation_alias=AliasChoices("type", "interaction_type")
    )
    action: Optional[Literal["add", "remove"]] = None


@router.post("/{loop_id}/interactions", response_model=InteractResponse)
async def interact(
    loop_id: str,
    request: InteractAPIRequest,
    interact_use_case: FromDishka[InteractUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> InteractResponse:
    """Like, save, share or view a loop.

    Requires authentication. Without `action`, like and save toggle.

    Args:
        loop_id: Loop UUID
        request: Interaction type and optional explicit action
        interact_use_case: Interact use case from DI
        auth_service: Auth service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Resulting action, the counter value and all loop counters
    """
    user_id = await require_user_id(auth_service, authorization)
    return await interact_use_case.execute(
        InteractRequest(
            user_id=user_id,
            loop_id=loop_id,
            interaction_type=request.type,
            action=request.action,
        )
    )


@router.get("/{loop_id}/interactions", response_model=GetInteractionsResponse)
async def get_interactions(
    loop_id: str,
    get_interactions_use_case: FromDishka[GetInteractionsUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> GetInteractionsResponse:
    """Get a loop's counters and what the caller has done to it."""
    viewer_id = await optional_user_id(auth_service, authorization)
    return await get_interactions_use_case.execute(
        GetInteractionsRequest(loop_id=loop_id, viewer_id=viewer_id)
    )
