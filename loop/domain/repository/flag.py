"""Content flag repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from loop.domain.model.flag import ContentFlag
from loop.domain.value import FlagId, FlagStatus, FlagTarget, UserId


class ContentFlagRepository(ABC):
    """Repository for ContentFlag entity."""

    @abstractmethod
    async def find_by_id(self, flag_id: FlagId) -> Optional[ContentFlag]:
        """Find a flag by ID."""
        pass

    @abstractmethod
    async def find_open(
        self, reporter_id: UserId, target_type: FlagTarget, target_id: UUID
    ) -> Optional[ContentFlag]:
        """Find the reporter's pending flag on a target, if any."""
        pass

    @abstractmethod
    async def find_by_status(
        self, status: Optional[FlagStatus], limit: int = 50, offset: int = 0
    ) -> List[ContentFlag]:
        """List flags newest first.

        Args:
            status: Only flags in this state (None for every state)
            limit: Maximum number of flags to return
            offset: Number of flags to skip
        """
        pass

    @abstractmethod
    async def save(self, flag: ContentFlag) -> ContentFlag:
        """Insert or update a flag."""
        pass
