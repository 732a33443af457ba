"""In-memory outbox repository for testing."""

from datetime import datetime

from loop.domain.model import OutboxMessage
from loop.domain.repository import OutboxRepository
from loop.domain.value import OutboxMessageId, OutboxStatus

from .database import InMemoryDatabase


class InMemoryOutboxRepository(OutboxRepository):
    """In-memory implementation of OutboxRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def save(self, message: OutboxMessage) -> OutboxMessage:
        self.db.outbox[message.id] = message
        return message

    async def find_retryable(self, max_attempts: int, limit: int) -> list[OutboxMessage]:
        messages = [
            m
            for m in self.db.outbox.values()
            if m.status != OutboxStatus.DONE and m.attempts < max_attempts
        ]
        messages.sort(key=lambda m: m.created_at)
        return messages[:limit]

    async def mark_done(self, message_id: OutboxMessageId) -> None:
        message = self.db.outbox[message_id]
        self.db.outbox[message_id] = message.model_copy(
            update={
                "status": OutboxStatus.DONE,
                "attempts": message.attempts + 1,
                "processed_at": datetime.now(),
            }
        )

    async def record_failure(self, message_id: OutboxMessageId, error: str) -> None:
        message = self.db.outbox[message_id]
        self.db.outbox[message_id] = message.model_copy(
            update={
                "status": OutboxStatus.FAILED,
                "attempts": message.attempts + 1,
                "last_error": error[:1000],
            }
        )
