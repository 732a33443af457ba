"""Resolve flag use case."""

from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.moderation.view import FlagInfo
from loop.domain.service import FlagService
from loop.domain.value import FlagId, FlagStatus, UserId


class ResolveFlagRequest(BaseModel):
    """Resolve flag request."""

    moderator_id: str  # User ID from authenticated user
    flag_id: str
    status: FlagStatus
    moderator_notes: Optional[str] = Field(default=None, max_length=1000)
    action_taken: Optional[str] = Field(default=None, max_length=100)


class ResolveFlagResponse(BaseModel):
    """Resolve flag response."""

    flag: FlagInfo


class ResolveFlagUseCase:
    """Use case for a moderator closing a flag."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: ResolveFlagRequest) -> ResolveFlagResponse:
        """Execute resolve flag flow.

        Raises:
            ForbiddenError: Without the moderate_content capability
            NotFoundError: If the flag does not exist
            ValidationError: If the status is `pending`
            ConflictError: If the flag was already reviewed
        """
        flag = await self.flag_service.resolve(
            FlagId(parse_id(request.flag_id, "flag_id")),
            UserId(parse_id(request.moderator_id, "moderator_id")),
            request.status,
            notes=request.moderator_notes,
            action_taken=request.action_taken,
        )
        return ResolveFlagResponse(flag=FlagInfo.from_flag(flag))
