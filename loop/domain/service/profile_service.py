"""Profile domain service."""

from datetime import datetime
from typing import Optional, Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from loop.domain.error import ConflictError, NotFoundError
from loop.domain.model.profile import Profile
from loop.domain.repository import ProfileRepository
from loop.domain.value import UserId, Username

from .base import Service

FALLBACK_NAME = "Someone"


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get(self, user_id: UserId) -> Profile:
        """Get a profile.

        Raises:
            NotFoundError: If the user has no profile
        """
        profile = await self.profile_repository.find_by_id(user_id)
        if profile is None:
            raise NotFoundError("Profile", str(user_id))
        return profile

    async def get_many(self, user_ids: Sequence[UserId]) -> dict[UserId, Profile]:
        if not user_ids:
            return {}
        profiles = await self.profile_repository.find_by_ids(list(set(user_ids)))
        return {profile.id: profile for profile in profiles}

    async def search(
        self, query: str, limit: int = 20, offset: int = 0
    ) -> list[Profile]:
        return await self.profile_repository.search(query, limit, offset)

    async def display_name(self, user_id: UserId) -> str:
        """Name used in notification titles. Never fails."""
        profile = await self.profile_repository.find_by_id(user_id)
        return profile.name if profile else FALLBACK_NAME

    async def upsert(
        self,
        user_id: UserId,
        username: Username,
        display_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> Profile:
        """Create or update the caller's own profile.

        Capability flags are preserved; they only change through the
        capability service.

        Raises:
            ConflictError: If the username is taken
        """
        with logfire.span(
            "profile_service.upsert", user_id=str(user_id), username=username.root
        ):
            existing = await self.profile_repository.find_by_username(username)
            if existing and existing.id != user_id:
                logfire.warn("Username taken", username=username.root)
                raise ConflictError(f"Username {username.root} is already taken")

            now = datetime.now()
            current = await self.profile_repository.find_by_id(user_id)
            if current:
                profile = current.model_copy(
                    update={
                        "username": username,
                        "display_name": display_name,
                        "avatar_url": avatar_url,
                        "bio": bio,
                        "updated_at": now,
                    }
                )
            else:
                profile = Profile(
                    id=user_id,
                    username=username,
                    display_name=display_name,
                    avatar_url=avatar_url,
                    bio=bio,
                    created_at=now,
                    updated_at=now,
                )

            try:
                saved = await self.profile_repository.save(profile)
            except IntegrityError:
                logfire.warn("Username race on upsert", username=username.root)
                raise ConflictError(f"Username {username.root} is already taken")

            logfire.info("Profile saved", user_id=str(user_id))
            return saved
