"""In-memory interaction repository for testing."""

from typing import Sequence

from loop.domain.model import Interaction
from loop.domain.repository import InteractionRepository
from loop.domain.value import InteractionType, LoopId, UserId

from .database import InMemoryDatabase


class InMemoryInteractionRepository(InteractionRepository):
    """In-memory implementation of InteractionRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def insert_if_absent(self, interaction: Interaction) -> bool:
        key = (interaction.user_id, interaction.loop_id, interaction.interaction_type)
        if key in self.db.interactions:
            return False
        self.db.interactions[key] = interaction
        return True

    async def delete(
        self, user_id: UserId, loop_id: LoopId, interaction_type: InteractionType
    ) -> bool:
        removed = self.db.interactions.pop((user_id, loop_id, interaction_type), None)
        return removed is not None

    async def find_by_user_and_loops(
        self, user_id: UserId, loop_ids: Sequence[LoopId]
    ) -> list[Interaction]:
        wanted = set(loop_ids)
        return [
            i
            for (uid, lid, _), i in self.db.interactions.items()
            if uid == user_id and lid in wanted
        ]
