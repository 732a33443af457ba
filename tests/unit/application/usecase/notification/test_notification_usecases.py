"""Unit tests for the notification use cases."""

import pytest

from loop.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadUseCase,
)
from loop.domain.service import NotificationService
from loop.domain.value import NotificationType
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotificationUseCases:
    """Tests for listing and marking notifications."""

    @pytest.mark.asyncio
    async def test_list_and_mark_read(self, unit_env):
        list_notifications = await unit_env.get(ListNotificationsUseCase)
        mark_read = await unit_env.get(MarkReadUseCase)
        notification_service = await unit_env.get(NotificationService)

        user_id = new_user_id()
        first = await notification_service.notify(
            user_id, NotificationType.LIKE, "Someone liked your loop", "m"
        )
        await notification_service.notify(
            user_id, NotificationType.COMMENT, "Someone commented", "m"
        )

        listed = await list_notifications.execute(
            ListNotificationsRequest(user_id=str(user_id))
        )
        assert len(listed.notifications) == 2
        assert listed.unread_count == 2

        marked = await mark_read.execute(
            MarkReadRequest(user_id=str(user_id), notification_ids=[str(first)])
        )
        assert marked.updated == 1

        unread = await list_notifications.execute(
            ListNotificationsRequest(user_id=str(user_id), unread_only=True)
        )
        assert [n.type for n in unread.notifications] == [NotificationType.COMMENT]
        assert unread.unread_count == 1

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        mark_read = await unit_env.get(MarkReadUseCase)
        notification_service = await unit_env.get(NotificationService)

        user_id = new_user_id()
        for _ in range(2):
            await notification_service.notify(user_id, NotificationType.SAVE, "t", "m")

        response = await mark_read.execute(MarkReadRequest(user_id=str(user_id)))

        assert response.success is True
        assert response.updated == 2
