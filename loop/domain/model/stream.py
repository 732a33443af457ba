"""Live stream entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import StreamId, UserId


class LiveStream(DomainModel):
    """A live broadcast owned by a single streamer."""

    id: StreamId
    streamer_id: UserId
    title: str = Field(min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, max_length=50)
    is_live: bool = False
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
