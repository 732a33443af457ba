"""List branches use case."""

from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopItem
from loop.domain.service import FeedService, LoopService
from loop.domain.value import LoopId, UserId


class ListBranchesRequest(BaseModel):
    """List branches request."""

    loop_id: str
    viewer_id: Optional[str] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListBranchesResponse(BaseModel):
    """List branches response."""

    branches: list[LoopItem]
    total: int


class ListBranchesUseCase:
    """Use case for listing the direct children of a loop."""

    def __init__(self, loop_service: LoopService, feed_service: FeedService) -> None:
        self.loop_service = loop_service
        self.feed_service = feed_service

    async def execute(self, request: ListBranchesRequest) -> ListBranchesResponse:
        loop_id = LoopId(parse_id(request.loop_id, "loop_id"))
        viewer_id = UserId(parse_id(request.viewer_id)) if request.viewer_id else None

        branches = await self.loop_service.list_branches(
            loop_id, limit=request.limit, offset=request.offset
        )
        views = await self.feed_service.views(viewer_id, branches)
        items = [LoopItem.from_view(view) for view in views]
        return ListBranchesResponse(branches=items, total=len(items))
