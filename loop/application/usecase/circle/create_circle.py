"""Create circle use case."""

from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.circle.view import CircleInfo
from loop.domain.service import CircleService
from loop.domain.value import UserId


class CreateCircleRequest(BaseModel):
    """Create circle request."""

    owner_id: str  # User ID from authenticated user
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)


class CreateCircleResponse(BaseModel):
    """Create circle response."""

    circle: CircleInfo


class CreateCircleUseCase:
    """Use case for creating a circle."""

    def __init__(self, circle_service: CircleService) -> None:
        self.circle_service = circle_service

    async def execute(self, request: CreateCircleRequest) -> CreateCircleResponse:
        circle = await self.circle_service.create(
            UserId(parse_id(request.owner_id, "owner_id")),
            request.name.strip(),
            request.description,
        )
        return CreateCircleResponse(circle=CircleInfo.from_circle(circle))
