"""List and get flag use cases."""

from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.moderation.view import FlagInfo
from loop.domain.service import FlagService
from loop.domain.value import FlagId, FlagStatus, UserId


class ListFlagsRequest(BaseModel):
    """List flags request. `status=None` lists every state."""

    requester_id: str  # User ID from authenticated user
    status: Optional[FlagStatus] = FlagStatus.PENDING
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListFlagsResponse(BaseModel):
    """List flags response."""

    flags: list[FlagInfo]


class ListFlagsUseCase:
    """Use case for reading the moderation queue."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: ListFlagsRequest) -> ListFlagsResponse:
        flags = await self.flag_service.list(
            UserId(parse_id(request.requester_id, "requester_id")),
            request.status,
            limit=request.limit,
            offset=request.offset,
        )
        return ListFlagsResponse(flags=[FlagInfo.from_flag(f) for f in flags])


class GetFlagRequest(BaseModel):
    """Get flag request."""

    requester_id: str
    flag_id: str


class GetFlagUseCase:
    """Use case for reading one flag (its reporter or a moderator)."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: GetFlagRequest) -> FlagInfo:
        flag = await self.flag_service.get(
            FlagId(parse_id(request.flag_id, "flag_id")),
            UserId(parse_id(request.requester_id, "requester_id")),
        )
        return FlagInfo.from_flag(flag)
