"""Loop repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from loop.domain.model.loop import Loop
from loop.domain.value import LoopId, TrendingWeights, UserId


class LoopRepository(ABC):
    """Repository for Loop aggregate.

    Defines the contract for loop persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, loop_id: LoopId) -> Optional[Loop]:
        """Find a loop by ID.

        Args:
            loop_id: The loop's unique identifier

        Returns:
            The loop if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, loop_ids: Sequence[LoopId]) -> List[Loop]:
        """Find several loops at once (batch query).

        Args:
            loop_ids: Loop IDs to fetch

        Returns:
            The loops that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, loop: Loop) -> Loop:
        """Insert a new loop.

        Loops are never updated after creation.

        Args:
            loop: The loop to insert

        Returns:
            The saved loop
        """
        pass

    @abstractmethod
    async def find_children(
        self, parent_id: LoopId, limit: int = 20, offset: int = 0
    ) -> List[Loop]:
        """Find direct branches of a loop, oldest first.

        Args:
            parent_id: The parent loop ID
            limit: Maximum number of loops to return
            offset: Number of loops to skip

        Returns:
            Direct children of the parent
        """
        pass

    @abstractmethod
    async def delete_subtree(self, loop_id: LoopId) -> int:
        """Delete a loop and every loop below it.

        Stats, interactions and comments of the removed loops go with them.

        Args:
            loop_id: Root of the subtree to delete

        Returns:
            Number of loops removed (0 if the loop did not exist)
        """
        pass

    @abstractmethod
    async def find_public_roots(
        self,
        author_ids: Optional[Sequence[UserId]] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Loop]:
        """Find public root loops, newest first.

        Args:
            author_ids: Restrict to these authors (None for everyone)
            limit: Maximum number of loops to return
            offset: Number of loops to skip

        Returns:
            Matching loops
        """
        pass

    @abstractmethod
    async def search_public(
        self, query: str, limit: int = 20, offset: int = 0
    ) -> List[Loop]:
        """Find public loops whose text contains `query`, newest first.

        Matching is case-insensitive over the free-text fields of the content
        (text, title, caption, description, file name). Branches match too.
        """
        pass

    @abstractmethod
    async def find_trending(
        self,
        since: datetime,
        weights: TrendingWeights,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Loop]:
        """Find public root loops ranked by recent activity.

        The score is a weighted sum of interactions, branches and comments
        created after `since`. Ties are broken by recency.

        Args:
            since: Start of the activity window
            weights: Weight per activity signal
            limit: Maximum number of loops to return
            offset: Number of loops to skip

        Returns:
            Loops ordered by score descending
        """
        pass
