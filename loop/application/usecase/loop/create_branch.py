"""Create branch use case."""

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopItem
from loop.domain.service import FeedService, LoopService
from loop.domain.value import LoopContent, LoopId, UserId


class CreateBranchRequest(BaseModel):
    """Create branch request."""

    author_id: str  # User ID from authenticated user
    parent_id: str
    content: LoopContent


class CreateBranchResponse(BaseModel):
    """Create branch response."""

    loop: LoopItem


class CreateBranchUseCase:
    """Use case for branching from an existing loop."""

    def __init__(self, loop_service: LoopService, feed_service: FeedService) -> None:
        self.loop_service = loop_service
        self.feed_service = feed_service

    async def execute(self, request: CreateBranchRequest) -> CreateBranchResponse:
        """Execute create branch flow.

        Raises:
            NotFoundError: If the parent loop does not exist
            DepthLimitExceededError: If the parent is already at maximum depth
            ValidationError: If content is empty
        """
        author_id = UserId(parse_id(request.author_id, "author_id"))
        parent_id = LoopId(parse_id(request.parent_id, "parent_id"))

        branch = await self.loop_service.create_branch(
            author_id=author_id,
            parent_id=parent_id,
            content=request.content,
        )
        view = await self.feed_service.view(author_id, branch)
        return CreateBranchResponse(loop=LoopItem.from_view(view))
