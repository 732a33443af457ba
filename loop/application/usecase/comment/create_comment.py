"""Create comment use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.comment.view import CommentItem
from loop.domain.service import CommentService, ProfileService
from loop.domain.value import CommentId, LoopId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    loop_id: str
    author_id: str  # User ID from authenticated user
    text: str
    parent_id: Optional[str] = None  # Comment being replied to


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a loop or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            profile_service: Author lookup for the response
        """
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            ValidationError: If text is blank or the parent is on another loop
            NotFoundError: If the loop or parent comment does not exist
        """
        author_id = UserId(parse_id(request.author_id, "author_id"))
        parent_id = (
            CommentId(parse_id(request.parent_id, "parent_id"))
            if request.parent_id
            else None
        )

        comment = await self.comment_service.create(
            loop_id=LoopId(parse_id(request.loop_id, "loop_id")),
            author_id=author_id,
            text=request.text,
            parent_id=parent_id,
        )
        authors = await self.profile_service.get_many([author_id])
        return CreateCommentResponse(
            comment=CommentItem.from_comment(comment, authors.get(author_id))
        )
