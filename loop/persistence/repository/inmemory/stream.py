"""In-memory live stream repository for testing."""

from typing import Optional

from loop.domain.model import LiveStream
from loop.domain.repository import LiveStreamRepository
from loop.domain.value import StreamId

from .database import InMemoryDatabase


class InMemoryLiveStreamRepository(LiveStreamRepository):
    """In-memory implementation of LiveStreamRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, stream_id: StreamId) -> Optional[LiveStream]:
        return self.db.streams.get(stream_id)

    async def save(self, stream: LiveStream) -> LiveStream:
        self.db.streams[stream.id] = stream
        return stream
