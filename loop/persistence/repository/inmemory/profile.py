"""In-memory profile repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from loop.domain.model import Profile
from loop.domain.repository import ProfileRepository
from loop.domain.value import UserId, Username

from .database import InMemoryDatabase


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        return self.db.profiles.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[Profile]:
        return [self.db.profiles[i] for i in user_ids if i in self.db.profiles]

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        for profile in self.db.profiles.values():
            if profile.username == username:
                return profile
        return None

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile.

        Raises:
            IntegrityError: If another profile holds the username
        """
        owner = await self.find_by_username(profile.username)
        if owner is not None and owner.id != profile.id:
            raise IntegrityError("Duplicate username", None, Exception())
        self.db.profiles[profile.id] = profile
        return profile

    async def search(
        self, query: str, limit: int = 20, offset: int = 0
    ) -> list[Profile]:
        needle = query.lower()
        profiles = [
            p
            for p in self.db.profiles.values()
            if any(
                needle in field.lower()
                for field in (p.username.root, p.display_name, p.bio)
                if field
            )
        ]
        profiles.sort(key=lambda p: p.username.root)
        return profiles[offset : offset + limit]
