"""Create flag use case."""

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.moderation.view import FlagInfo
from loop.domain.service import FlagService
from loop.domain.value import FlagReason, FlagTarget, UserId


class CreateFlagRequest(BaseModel):
    """Create flag request."""

    reporter_id: str  # User ID from authenticated user
    target_type: FlagTarget
    target_id: str
    reason: FlagReason
    description: str = Field(default="", max_length=1000)


class CreateFlagResponse(BaseModel):
    """Create flag response."""

    flag: FlagInfo


class CreateFlagUseCase:
    """Use case for reporting a loop, comment or user."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: CreateFlagRequest) -> CreateFlagResponse:
        """Execute create flag flow.

        Raises:
            NotFoundError: If the target does not exist
            ConflictError: If the caller already flagged it and it is still pending
        """
        flag = await self.flag_service.create(
            UserId(parse_id(request.reporter_id, "reporter_id")),
            request.target_type,
            parse_id(request.target_id, "target_id"),
            request.reason,
            request.description,
        )
        return CreateFlagResponse(flag=FlagInfo.from_flag(flag))
