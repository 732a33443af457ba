"""Capability domain service.

Capabilities come from two places: bootstrap admin IDs in configuration,
and the admin/moderator flags on a user's profile.
"""

import logfire

from loop.config import AuthSettings
from loop.domain.error import ForbiddenError, NotFoundError
from loop.domain.model.profile import Profile
from loop.domain.repository import ProfileRepository
from loop.domain.value import Capability, UserId

from .base import Service


class CapabilityService(Service):
    """Domain service for capability checks."""

    def __init__(
        self, profile_repository: ProfileRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize capability service.

        Args:
            profile_repository: Profile repository
            auth_settings: Holds the bootstrap admin user IDs
        """
        self.profile_repository = profile_repository
        self.admin_user_ids = {UserId(uid) for uid in auth_settings.admin_user_ids}

    async def has_capability(self, user_id: UserId, capability: Capability) -> bool:
        """Check whether a user holds a capability.

        Users without a profile hold nothing unless configured as admins.
        """
        if user_id in self.admin_user_ids:
            return True

        profile = await self.profile_repository.find_by_id(user_id)
        if profile is None:
            return False
        if profile.is_admin:
            return True
        if capability == Capability.MODERATE_CONTENT:
            return profile.is_moderator
        return False

    async def require(
        self,
        user_id: UserId,
        capability: Capability,
        action: str,
        resource: str,
        resource_id: str,
    ) -> None:
        """Raise ForbiddenError unless the user holds the capability."""
        if not await self.has_capability(user_id, capability):
            logfire.warn(
                "Capability check failed",
                user_id=str(user_id),
                capability=capability.value,
                action=action,
            )
            raise ForbiddenError(action, resource, resource_id, str(user_id))

    async def set_moderator(
        self, actor_id: UserId, target_id: UserId, moderator: bool
    ) -> Profile:
        """Grant or revoke the moderator flag of a user.

        Args:
            actor_id: User performing the change (needs manage_users)
            target_id: User whose flag changes
            moderator: New flag value

        Returns:
            The updated profile

        Raises:
            ForbiddenError: If the actor cannot manage users
            NotFoundError: If the target has no profile
        """
        with logfire.span(
            "capability_service.set_moderator",
            actor_id=str(actor_id),
            target_id=str(target_id),
            moderator=moderator,
        ):
            await self.require(
                actor_id, Capability.MANAGE_USERS, "manage", "user", str(target_id)
            )

            profile = await self.profile_repository.find_by_id(target_id)
            if profile is None:
                raise NotFoundError("Profile", str(target_id))

            updated = await self.profile_repository.save(
                profile.model_copy(update={"is_moderator": moderator})
            )
            logfire.info(
                "Moderator flag changed", target_id=str(target_id), moderator=moderator
            )
            return updated
