"""Get loop interactions use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopStatsInfo, ViewerStateInfo
from loop.domain.service import CounterService, LoopService
from loop.domain.value import LoopId, UserId


class GetInteractionsRequest(BaseModel):
    """Get interactions request."""

    loop_id: str
    viewer_id: Optional[str] = None


class GetInteractionsResponse(BaseModel):
    """Counters of a loop and what the viewer has done to it."""

    loop_id: str
    stats: LoopStatsInfo
    viewer: ViewerStateInfo


class GetInteractionsUseCase:
    """Use case for reading a loop's counters and the viewer's state."""

    def __init__(
        self, loop_service: LoopService, counter_service: CounterService
    ) -> None:
        self.loop_service = loop_service
        self.counter_service = counter_service

    async def execute(self, request: GetInteractionsRequest) -> GetInteractionsResponse:
        loop_id = LoopId(parse_id(request.loop_id, "loop_id"))
        viewer_id = UserId(parse_id(request.viewer_id)) if request.viewer_id else None

        await self.loop_service.get(loop_id)
        stats = await self.counter_service.get_stats(loop_id)
        states = await self.counter_service.viewer_state(viewer_id, [loop_id])

        return GetInteractionsResponse(
            loop_id=str(loop_id),
            stats=LoopStatsInfo.from_stats(stats),
            viewer=ViewerStateInfo.from_state(states[loop_id]),
        )
