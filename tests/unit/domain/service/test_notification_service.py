"""Unit tests for NotificationService."""

import pytest

from loop.domain.repository import NotificationRepository
from loop.domain.service import NotificationService
from loop.domain.value import NotificationType
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotificationService:
    """Tests for NotificationService."""

    @pytest.mark.asyncio
    async def test_notify_many_writes_one_batch(self, unit_env):
        """Fan-out to many followers is a single repository write."""
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)

        recipients = [new_user_id() for _ in range(25)]

        count = await notification_service.notify_many(
            recipients,
            NotificationType.LIVE_STREAM_STARTED,
            "dj is now live!",
            "Friday night set",
        )

        assert count == 25
        assert notification_repo.write_calls == 1
        for recipient in recipients:
            assert await notification_service.count_unread(recipient) == 1

    @pytest.mark.asyncio
    async def test_notify_many_deduplicates_recipients(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        recipient = new_user_id()
        count = await notification_service.notify_many(
            [recipient, recipient], NotificationType.FOLLOW, "t", "m"
        )

        assert count == 1

    @pytest.mark.asyncio
    async def test_notify_many_without_recipients_writes_nothing(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)

        count = await notification_service.notify_many(
            [], NotificationType.FOLLOW, "t", "m"
        )

        assert count == 0
        assert notification_repo.write_calls == 0

    @pytest.mark.asyncio
    async def test_mark_read_only_touches_own_notifications(self, unit_env):
        """Marking read by ID ignores notifications of other recipients."""
        notification_service = await unit_env.get(NotificationService)

        alice, bob = new_user_id(), new_user_id()
        alice_note = await notification_service.notify(
            alice, NotificationType.LIKE, "t", "m"
        )
        bob_note = await notification_service.notify(
            bob, NotificationType.LIKE, "t", "m"
        )

        updated = await notification_service.mark_read(alice, [alice_note, bob_note])

        assert updated == 1
        assert await notification_service.count_unread(alice) == 0
        assert await notification_service.count_unread(bob) == 1

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        alice = new_user_id()
        for _ in range(3):
            await notification_service.notify(alice, NotificationType.SAVE, "t", "m")

        assert await notification_service.mark_read(alice) == 3
        assert await notification_service.mark_read(alice) == 0

        unread = await notification_service.list_for_recipient(alice, unread_only=True)
        assert unread == []

    @pytest.mark.asyncio
    async def test_mark_read_with_empty_list_is_noop(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        alice = new_user_id()
        await notification_service.notify(alice, NotificationType.SAVE, "t", "m")

        assert await notification_service.mark_read(alice, []) == 0
        assert await notification_service.count_unread(alice) == 1
