"""Join circle use case."""

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.domain.service import CircleService
from loop.domain.value import CircleId, UserId


class JoinCircleRequest(BaseModel):
    """Join circle request."""

    circle_id: str
    user_id: str  # User ID from authenticated user


class JoinCircleResponse(BaseModel):
    """Join circle response."""

    success: bool
    joined: bool  # False if the user was already a member


class JoinCircleUseCase:
    """Use case for joining a circle."""

    def __init__(self, circle_service: CircleService) -> None:
        self.circle_service = circle_service

    async def execute(self, request: JoinCircleRequest) -> JoinCircleResponse:
        """Execute join flow.

        Raises:
            NotFoundError: If the circle does not exist
        """
        joined = await self.circle_service.join(
            CircleId(parse_id(request.circle_id, "circle_id")),
            UserId(parse_id(request.user_id, "user_id")),
        )
        return JoinCircleResponse(success=True, joined=joined)
