"""Get loop use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopItem
from loop.domain.error import NotFoundError, ValidationError
from loop.domain.service import FeedService, LoopService
from loop.domain.value import LoopId, UserId


class GetLoopRequest(BaseModel):
    """Get loop request."""

    loop_id: str
    viewer_id: Optional[str] = None


class GetLoopResponse(BaseModel):
    """Get loop response."""

    loop: LoopItem


class GetLoopUseCase:
    """Use case for fetching one loop with its counters."""

    def __init__(self, loop_service: LoopService, feed_service: FeedService) -> None:
        self.loop_service = loop_service
        self.feed_service = feed_service

    async def execute(self, request: GetLoopRequest) -> GetLoopResponse:
        """Execute get loop flow.

        Raises:
            NotFoundError: If the loop does not exist (or the id is malformed)
        """
        try:
            loop_id = LoopId(parse_id(request.loop_id, "loop_id"))
        except ValidationError:
            raise NotFoundError("Loop", request.loop_id)
        viewer_id = UserId(parse_id(request.viewer_id)) if request.viewer_id else None

        loop = await self.loop_service.get(loop_id)
        view = await self.feed_service.view(viewer_id, loop)
        return GetLoopResponse(loop=LoopItem.from_view(view))
