"""Create loop use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopItem
from loop.domain.service import FeedService, LoopService
from loop.domain.value import CircleId, LoopContent, UserId, Visibility


class CreateLoopRequest(BaseModel):
    """Create root loop request."""

    author_id: str  # User ID from authenticated user
    content: LoopContent
    circle_id: Optional[str] = None
    visibility: Visibility = Visibility.PUBLIC


class CreateLoopResponse(BaseModel):
    """Create loop response."""

    loop: LoopItem


class CreateLoopUseCase:
    """Use case for creating a root loop."""

    def __init__(self, loop_service: LoopService, feed_service: FeedService) -> None:
        """Initialize create loop use case.

        Args:
            loop_service: Loop domain service
            feed_service: Feed service (builds the returned view)
        """
        self.loop_service = loop_service
        self.feed_service = feed_service

    async def execute(self, request: CreateLoopRequest) -> CreateLoopResponse:
        """Execute create loop flow.

        Args:
            request: Create loop request

        Returns:
            Created loop with zeroed counters

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the circle does not exist
            ForbiddenError: If the author is not a member of the circle
        """
        author_id = UserId(parse_id(request.author_id, "author_id"))
        circle_id = (
            CircleId(parse_id(request.circle_id, "circle_id"))
            if request.circle_id
            else None
        )

        loop = await self.loop_service.create_root(
            author_id=author_id,
            content=request.content,
            circle_id=circle_id,
            visibility=request.visibility,
        )
        view = await self.feed_service.view(author_id, loop)
        return CreateLoopResponse(loop=LoopItem.from_view(view))
