"""Side-effect dispatcher.

Counter adjustments, notifications and real-time broadcasts that follow a
primary write run here. Each effect executes inside its own savepoint; a
failure is logged, written to the outbox for replay, and never propagates
to the caller.
"""

from datetime import datetime
from typing import Any, Sequence
from uuid import uuid4

import logfire
from pydantic import BaseModel

from loop.config import OutboxSettings
from loop.domain.model.outbox import OutboxMessage
from loop.domain.model.side_effect import (
    AdjustCounter,
    Broadcast,
    Notify,
    NotifyMany,
    SideEffect,
    side_effect_adapter,
)
from loop.domain.repository import OutboxRepository, TransactionManager
from loop.domain.value import OutboxMessageId, OutboxStatus

from .base import Service
from .counter_service import CounterService
from .notification_service import NotificationService


class RealtimeTransport:
    """Generic real-time broadcast interface."""

    async def broadcast(self, room: str, event: str, payload: dict[str, Any]) -> None:
        """Publish an event to everyone subscribed to a room.

        Args:
            room: Room (channel) name, e.g. "loop:<id>"
            event: Event name
            payload: JSON-serializable payload
        """
        raise NotImplementedError


class ReplayReport(BaseModel):
    """Outcome of one outbox replay run."""

    replayed: int = 0
    failed: int = 0


class SideEffectDispatcher(Service):
    """Runs side effects in isolation from the primary write."""

    def __init__(
        self,
        transaction_manager: TransactionManager,
        counter_service: CounterService,
        notification_service: NotificationService,
        realtime: RealtimeTransport,
        outbox_repository: OutboxRepository,
        outbox_settings: OutboxSettings,
    ) -> None:
        """Initialize dispatcher.

        Args:
            transaction_manager: Savepoint control over the request transaction
            counter_service: Counter domain service
            notification_service: Notification domain service
            realtime: Real-time transport
            outbox_repository: Outbox repository
            outbox_settings: Replay configuration
        """
        self.transaction_manager = transaction_manager
        self.counter_service = counter_service
        self.notification_service = notification_service
        self.realtime = realtime
        self.outbox_repository = outbox_repository
        self.outbox_settings = outbox_settings

    async def dispatch(self, effect: SideEffect) -> bool:
        """Run one side effect.

        Returns:
            True if the effect succeeded, False if it failed and was kept
            in the outbox
        """
        with logfire.span("dispatcher.dispatch", kind=effect.kind):
            try:
                async with self.transaction_manager.savepoint():
                    await self.execute(effect)
                return True
            except Exception as e:
                logfire.error(
                    "Side effect failed",
                    kind=effect.kind,
                    error=str(e),
                    error_type=type(e).__name__,
                    payload=effect.model_dump(mode="json"),
                )
                await self._store_failure(effect, e)
                return False

    async def dispatch_all(self, effects: Sequence[SideEffect]) -> int:
        """Run effects in order. A failing effect does not stop the rest.

        Returns:
            Number of effects that succeeded
        """
        succeeded = 0
        for effect in effects:
            if await self.dispatch(effect):
                succeeded += 1
        return succeeded

    async def execute(self, effect: SideEffect) -> None:
        """Run the handler for an effect and let failures propagate."""
        if isinstance(effect, AdjustCounter):
            await self.counter_service.adjust_by(
                effect.loop_id, effect.counter, effect.delta
            )
        elif isinstance(effect, Notify):
            await self.notification_service.notify(
                effect.recipient_id,
                effect.type,
                effect.title,
                effect.message,
                effect.data,
            )
        elif isinstance(effect, NotifyMany):
            await self.notification_service.notify_many(
                effect.recipient_ids,
                effect.type,
                effect.title,
                effect.message,
                effect.data,
            )
        elif isinstance(effect, Broadcast):
            await self.realtime.broadcast(effect.room, effect.event, effect.payload)
        else:
            raise ValueError(f"Unknown side effect: {effect!r}")

    async def replay(self, limit: int | None = None) -> ReplayReport:
        """Re-run failed side effects from the outbox.

        Messages that reach `max_attempts` are left in place for inspection.
        """
        limit = limit or self.outbox_settings.replay_batch_size
        report = ReplayReport()

        with logfire.span("dispatcher.replay", limit=limit):
            messages = await self.outbox_repository.find_retryable(
                self.outbox_settings.max_attempts, limit
            )
            for message in messages:
                try:
                    effect = side_effect_adapter.validate_python(message.payload)
                    async with self.transaction_manager.savepoint():
                        await self.execute(effect)
                except Exception as e:
                    logfire.warn(
                        "Outbox replay failed",
                        message_id=str(message.id),
                        attempts=message.attempts + 1,
                        error=str(e),
                    )
                    await self.outbox_repository.record_failure(message.id, str(e))
                    report.failed += 1
                else:
                    await self.outbox_repository.mark_done(message.id)
                    report.replayed += 1

            logfire.info(
                "Outbox replay finished",
                replayed=report.replayed,
                failed=report.failed,
            )
            return report

    async def _store_failure(self, effect: SideEffect, error: Exception) -> None:
        message = OutboxMessage(
            id=OutboxMessageId(uuid4()),
            kind=effect.kind,
            payload=effect.model_dump(mode="json"),
            status=OutboxStatus.FAILED,
            attempts=1,
            last_error=str(error)[:1000],
            created_at=datetime.now(),
        )
        try:
            async with self.transaction_manager.savepoint():
                await self.outbox_repository.save(message)
        except Exception as e:
            logfire.error(
                "Could not store failed side effect",
                kind=effect.kind,
                error=str(e),
            )
