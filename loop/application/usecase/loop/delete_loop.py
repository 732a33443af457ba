"""Delete loop use case."""

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.domain.service import LoopService
from loop.domain.value import LoopId, UserId


class DeleteLoopRequest(BaseModel):
    """Delete loop request."""

    loop_id: str
    requester_id: str  # User ID from authenticated user


class DeleteLoopResponse(BaseModel):
    """Delete loop response."""

    success: bool
    deleted: int


class DeleteLoopUseCase:
    """Use case for deleting a loop and everything branched from it."""

    def __init__(self, loop_service: LoopService) -> None:
        self.loop_service = loop_service

    async def execute(self, request: DeleteLoopRequest) -> DeleteLoopResponse:
        """Execute delete loop flow.

        Raises:
            NotFoundError: If the loop does not exist
            ForbiddenError: If the requester is neither author nor moderator
        """
        removed = await self.loop_service.delete(
            LoopId(parse_id(request.loop_id, "loop_id")),
            UserId(parse_id(request.requester_id, "requester_id")),
        )
        return DeleteLoopResponse(success=True, deleted=removed)
