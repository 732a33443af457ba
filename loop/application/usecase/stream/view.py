"""Response models for stream use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from loop.domain.model import LiveStream


class StreamInfo(BaseModel):
    """Live stream as returned by the API."""

    id: str
    streamer_id: str
    title: str
    category: Optional[str]
    is_live: bool
    started_at: Optional[datetime]
    ended_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_stream(cls, stream: LiveStream) -> "StreamInfo":
        return cls(
            id=str(stream.id),
            streamer_id=str(stream.streamer_id),
            title=stream.title,
            category=stream.category,
            is_live=stream.is_live,
            started_at=stream.started_at,
            ended_at=stream.ended_at,
            created_at=stream.created_at,
        )
