"""Live stream repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from loop.domain.model.stream import LiveStream
from loop.domain.value import StreamId


class LiveStreamRepository(ABC):
    """Repository for LiveStream entity."""

    @abstractmethod
    async def find_by_id(self, stream_id: StreamId) -> Optional[LiveStream]:
        """Find a stream by ID."""
        pass

    @abstractmethod
    async def save(self, stream: LiveStream) -> LiveStream:
        """Insert or update a stream."""
        pass
