"""Get circle use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.circle.view import CircleInfo
from loop.domain.service import CircleService
from loop.domain.value import CircleId, UserId


class GetCircleRequest(BaseModel):
    """Get circle request."""

    circle_id: str
    viewer_id: Optional[str] = None


class GetCircleResponse(BaseModel):
    """Get circle response."""

    circle: CircleInfo
    is_member: bool


class GetCircleUseCase:
    """Use case for reading a circle."""

    def __init__(self, circle_service: CircleService) -> None:
        self.circle_service = circle_service

    async def execute(self, request: GetCircleRequest) -> GetCircleResponse:
        circle_id = CircleId(parse_id(request.circle_id, "circle_id"))
        circle = await self.circle_service.get(circle_id)

        is_member = False
        if request.viewer_id:
            is_member = await self.circle_service.is_member(
                circle_id, UserId(parse_id(request.viewer_id, "viewer_id"))
            )

        return GetCircleResponse(
            circle=CircleInfo.from_circle(circle), is_member=is_member
        )
