"""In-memory content flag repository for testing."""

from typing import Optional
from uuid import UUID

from loop.domain.model import ContentFlag
from loop.domain.repository import ContentFlagRepository
from loop.domain.value import FlagId, FlagStatus, FlagTarget, UserId

from .database import InMemoryDatabase


class InMemoryContentFlagRepository(ContentFlagRepository):
    """In-memory implementation of ContentFlagRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, flag_id: FlagId) -> Optional[ContentFlag]:
        return self.db.flags.get(flag_id)

    async def find_open(
        self, reporter_id: UserId, target_type: FlagTarget, target_id: UUID
    ) -> Optional[ContentFlag]:
        for flag in self.db.flags.values():
            if (
                flag.is_open
                and flag.reporter_id == reporter_id
                and flag.target_type == target_type
                and flag.target_id == target_id
            ):
                return flag
        return None

    async def find_by_status(
        self, status: Optional[FlagStatus], limit: int = 50, offset: int = 0
    ) -> list[ContentFlag]:
        flags = [
            f for f in self.db.flags.values() if status is None or f.status == status
        ]
        flags.sort(key=lambda f: (f.created_at, f.id), reverse=True)
        return flags[offset : offset + limit]

    async def save(self, flag: ContentFlag) -> ContentFlag:
        self.db.flags[flag.id] = flag
        return flag
