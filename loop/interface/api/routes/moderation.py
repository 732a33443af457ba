"""Moderation routes (content flags)."""

from typing import Literal, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from loop.application.usecase.moderation import (
    CreateFlagRequest,
    CreateFlagResponse,
    CreateFlagUseCase,
    FlagInfo,
    GetFlagRequest,
    GetFlagUseCase,
    ListFlagsRequest,
    ListFlagsResponse,
    ListFlagsUseCase,
    ResolveFlagRequest,
    ResolveFlagResponse,
    ResolveFlagUseCase,
)
from loop.domain.service import AuthService
from loop.domain.value import FlagReason, FlagStatus, FlagTarget
from loop.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/moderation", tags=["moderation"], route_class=DishkaRoute
)


class CreateFlagAPIRequest(BaseModel):
    """API request for flagging content."""

    target_type: FlagTarget
    target_id: str
    reason: FlagReason
    description: str = Field(default="", max_length=1000)


class ResolveFlagAPIRequest(BaseModel):
    """API request for closing a flag."""

    status: Literal["resolved", "dismissed"]
    moderator_notes: Optional[str] = Field(default=None, max_length=1000)
    action_taken: Optional[str] = Field(default=None, max_length=100)


@router.post(
    "/flags", response_model=CreateFlagResponse, status_code=status.HTTP_201_CREATED
)
async def create_flag(
    request: CreateFlagAPIRequest,
    create_flag_use_case: FromDishka[CreateFlagUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreateFlagResponse:
    """Flag a loop, comment or user for review.

    Requires authentication. One pending flag per reporter and target.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await create_flag_use_case.execute(
        CreateFlagRequest(
            reporter_id=user_id,
            target_type=request.target_type,
            target_id=request.target_id,
            reason=request.reason,
            description=request.description,
        )
    )


@router.get("/flags", response_model=ListFlagsResponse)
async def list_flags(
    list_flags_use_case: FromDishka[ListFlagsUseCase],
    auth_service: FromDishka[AuthService],
    status: Literal["pending", "resolved", "dismissed", "all"] = "pending",
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListFlagsResponse:
    """Moderation queue, newest first. Requires `moderate_content`."""
    user_id = await require_user_id(auth_service, authorization)
    return await list_flags_use_case.execute(
        ListFlagsRequest(
            requester_id=user_id,
            status=None if status == "all" else FlagStatus(status),
            limit=limit,
            offset=offset,
        )
    )


@router.get("/flags/{flag_id}", response_model=FlagInfo)
async def get_flag(
    flag_id: str,
    get_flag_use_case: FromDishka[GetFlagUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> FlagInfo:
    """Get one flag. Visible to its reporter and to moderators."""
    user_id = await require_user_id(auth_service, authorization)
    return await get_flag_use_case.execute(
        GetFlagRequest(requester_id=user_id, flag_id=flag_id)
    )


@router.put("/flags/{flag_id}", response_model=ResolveFlagResponse)
async def resolve_flag(
    flag_id: str,
    request: ResolveFlagAPIRequest,
    resolve_flag_use_case: FromDishka[ResolveFlagUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> ResolveFlagResponse:
    """Close a pending flag as resolved or dismissed. Requires `moderate_content`."""
    user_id = await require_user_id(auth_service, authorization)
    return await resolve_flag_use_case.execute(
        ResolveFlagRequest(
            moderator_id=user_id,
            flag_id=flag_id,
            status=FlagStatus(request.status),
            moderator_notes=request.moderator_notes,
            action_taken=request.action_taken,
        )
    )
