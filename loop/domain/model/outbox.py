"""Outbox message: a side effect that failed and is kept for replay."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import OutboxMessageId, OutboxStatus


class OutboxMessage(DomainModel):
    """Serialized side effect plus its delivery bookkeeping."""

    id: OutboxMessageId
    kind: str
    payload: dict[str, Any]
    status: OutboxStatus = OutboxStatus.FAILED
    attempts: int = Field(default=1, ge=0)
    last_error: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    processed_at: Optional[datetime] = None
