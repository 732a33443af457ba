"""Get current user use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.user.view import ProfileInfo
from loop.domain.service import AuthService, CapabilityService, ProfileService
from loop.domain.value import Capability


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    authorization: Optional[str]  # Raw Authorization header


class GetCurrentUserResponse(BaseModel):
    """Get current user response.

    The profile is missing until the user has saved one.
    """

    user_id: str
    profile: Optional[ProfileInfo]
    capabilities: list[Capability]


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated caller."""

    def __init__(
        self,
        auth_service: AuthService,
        profile_service: ProfileService,
        capability_service: CapabilityService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Token verification
            profile_service: Profile lookup
            capability_service: Capability lookup
        """
        self.auth_service = auth_service
        self.profile_service = profile_service
        self.capability_service = capability_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            AuthenticationError: If the header is missing or the token invalid
        """
        user_id = await self.auth_service.authenticate(request.authorization)

        profiles = await self.profile_service.get_many([user_id])
        profile = profiles.get(user_id)
        capabilities = [
            capability
            for capability in Capability
            if await self.capability_service.has_capability(user_id, capability)
        ]

        return GetCurrentUserResponse(
            user_id=str(user_id),
            profile=ProfileInfo.from_profile(profile) if profile else None,
            capabilities=capabilities,
        )
