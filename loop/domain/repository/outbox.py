"""Outbox repository interface."""

from abc import ABC, abstractmethod
from typing import List

from loop.domain.model.outbox import OutboxMessage
from loop.domain.value import OutboxMessageId


class OutboxRepository(ABC):
    """Repository for side effects awaiting replay."""

    @abstractmethod
    async def save(self, message: OutboxMessage) -> OutboxMessage:
        """Insert an outbox message."""
        pass

    @abstractmethod
    async def find_retryable(self, max_attempts: int, limit: int) -> List[OutboxMessage]:
        """Find failed messages that have not exhausted their attempts.

        Args:
            max_attempts: Messages with this many attempts are skipped
            limit: Maximum number of messages to return

        Returns:
            Messages oldest first
        """
        pass

    @abstractmethod
    async def mark_done(self, message_id: OutboxMessageId) -> None:
        """Mark a message as delivered."""
        pass

    @abstractmethod
    async def record_failure(self, message_id: OutboxMessageId, error: str) -> None:
        """Bump the attempt count and store the latest error."""
        pass
