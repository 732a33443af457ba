"""Interaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from loop.domain.model.interaction import Interaction
from loop.domain.value import InteractionType, LoopId, UserId


class InteractionRepository(ABC):
    """Repository for per-user loop interactions.

    At most one interaction exists per (user, loop, type). Implementations
    rely on the unique constraint rather than read-then-write checks.
    """

    @abstractmethod
    async def insert_if_absent(self, interaction: Interaction) -> bool:
        """Insert an interaction unless an identical one exists.

        Args:
            interaction: The interaction to insert

        Returns:
            True if a row was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def delete(
        self, user_id: UserId, loop_id: LoopId, interaction_type: InteractionType
    ) -> bool:
        """Delete an interaction.

        Args:
            user_id: The user's ID
            loop_id: The loop ID
            interaction_type: Interaction type

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_user_and_loops(
        self, user_id: UserId, loop_ids: Sequence[LoopId]
    ) -> List[Interaction]:
        """Find a user's interactions on multiple loops (batch query).

        Args:
            user_id: The user's ID
            loop_ids: Loop IDs to check

        Returns:
            Every interaction of the user on those loops
        """
        pass
