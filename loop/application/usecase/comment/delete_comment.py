"""Delete comment use case."""

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.domain.service import CommentService
from loop.domain.value import CommentId, LoopId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    loop_id: str
    comment_id: str
    requester_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    deleted: int


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        removed = await self.comment_service.delete(
            LoopId(parse_id(request.loop_id, "loop_id")),
            CommentId(parse_id(request.comment_id, "comment_id")),
            UserId(parse_id(request.requester_id, "requester_id")),
        )
        return DeleteCommentResponse(success=True, deleted=removed)
