"""Get feed use case."""

from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopItem
from loop.domain.service import FeedService
from loop.domain.value import FeedMode, UserId


class GetFeedRequest(BaseModel):
    """Get feed request."""

    viewer_id: Optional[str] = None
    type: FeedMode = FeedMode.RECENT
    limit: Optional[int] = None  # Defaults to feed.default_limit
    offset: int = 0


class PaginationInfo(BaseModel):
    """Paging details echoed back to the client."""

    limit: int
    offset: int
    total: int


class GetFeedResponse(BaseModel):
    """Get feed response."""

    success: bool = True
    loops: list[LoopItem]
    has_more: bool = Field(serialization_alias="hasMore")
    type: FeedMode
    pagination: PaginationInfo


class GetFeedUseCase:
    """Use case for reading one page of a feed."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize get feed use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Execute get feed flow.

        Args:
            request: Get feed request

        Returns:
            Feed page. `total` is the number of items on this page.

        Raises:
            ValidationError: If paging is out of range or the feed needs a viewer
        """
        viewer_id = (
            UserId(parse_id(request.viewer_id, "viewer_id"))
            if request.viewer_id
            else None
        )

        page = await self.feed_service.assemble(
            viewer_id, request.type, limit=request.limit, offset=request.offset
        )
        loops = [LoopItem.from_view(view) for view in page.items]

        return GetFeedResponse(
            loops=loops,
            has_more=page.has_more,
            type=page.mode,
            pagination=PaginationInfo(
                limit=page.limit, offset=page.offset, total=len(loops)
            ),
        )
