"""Set user capabilities use case."""

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.user.view import ProfileInfo
from loop.domain.service import CapabilityService
from loop.domain.value import UserId


class SetCapabilitiesRequest(BaseModel):
    """Set capabilities request."""

    actor_id: str  # User ID from authenticated user
    target_user_id: str
    moderator: bool


class SetCapabilitiesResponse(BaseModel):
    """Set capabilities response."""

    profile: ProfileInfo


class SetCapabilitiesUseCase:
    """Use case for granting or revoking moderation rights."""

    def __init__(self, capability_service: CapabilityService) -> None:
        self.capability_service = capability_service

    async def execute(self, request: SetCapabilitiesRequest) -> SetCapabilitiesResponse:
        """Execute capability change.

        Raises:
            ForbiddenError: If the actor cannot manage users
            NotFoundError: If the target has no profile
        """
        profile = await self.capability_service.set_moderator(
            UserId(parse_id(request.actor_id, "actor_id")),
            UserId(parse_id(request.target_user_id, "target_user_id")),
            request.moderator,
        )
        return SetCapabilitiesResponse(profile=ProfileInfo.from_profile(profile))
