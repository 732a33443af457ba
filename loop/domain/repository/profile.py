"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from loop.domain.model.profile import Profile
from loop.domain.value import UserId, Username


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: The user's ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find several profiles at once (batch query)."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile.

        Raises:
            IntegrityError: If the username is taken by another profile
        """
        pass

    @abstractmethod
    async def search(
        self, query: str, limit: int = 20, offset: int = 0
    ) -> List[Profile]:
        """Find profiles whose username, display name or bio contains `query`.

        Case-insensitive, ordered by username.
        """
        pass
