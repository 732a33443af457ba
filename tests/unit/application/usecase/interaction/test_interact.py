"""Unit tests for InteractUseCase."""

from uuid import uuid4

import pytest

from loop.application.usecase.interaction import (
    GetInteractionsRequest,
    GetInteractionsUseCase,
    InteractRequest,
    InteractUseCase,
)
from loop.domain.error import NotFoundError, ValidationError
from loop.domain.repository import NotificationRepository, ProfileRepository
from loop.domain.service import LoopService, RealtimeTransport
from loop.domain.value import InteractionType, NotificationType, ToggleAction
from tests.conftest import make_profile, new_user_id, text
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestInteractUseCase:
    """Tests for InteractUseCase."""

    @pytest.mark.asyncio
    async def test_like_toggles_and_notifies_once(self, unit_env):
        """Like notifies the author, unlike does not."""
        interact = await unit_env.get(InteractUseCase)
        loop_service = await unit_env.get(LoopService)
        notification_repo = await unit_env.get(NotificationRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        realtime = await unit_env.get(RealtimeTransport)

        fan = await make_profile(profile_repo, "fan", display_name="Fan")
        author_id = new_user_id()
        loop = await loop_service.create_root(author_id, text())

        request = InteractRequest(
            user_id=str(fan.id),
            loop_id=str(loop.id),
            interaction_type=InteractionType.LIKE,
        )
        liked = await interact.execute(request)
        unliked = await interact.execute(request)

        assert liked.action == ToggleAction.ADDED
        assert liked.is_active is True
        assert liked.count == 1
        assert liked.stats.likes == 1
        assert unliked.action == ToggleAction.REMOVED
        assert unliked.is_active is False
        assert unliked.stats.likes == 0

        notifications = await notification_repo.find_by_recipient(author_id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.LIKE
        assert notifications[0].title == "Fan liked your loop"

        assert realtime.events(f"loop:{loop.id}") == [
            "loop_interaction",
            "loop_interaction",
        ]

    @pytest.mark.asyncio
    async def test_explicit_add_is_idempotent(self, unit_env):
        interact = await unit_env.get(InteractUseCase)
        loop_service = await unit_env.get(LoopService)

        loop = await loop_service.create_root(new_user_id(), text())
        request = InteractRequest(
            user_id=str(new_user_id()),
            loop_id=str(loop.id),
            interaction_type=InteractionType.SAVE,
            action="add",
        )

        first = await interact.execute(request)
        second = await interact.execute(request)

        assert first.action == ToggleAction.ADDED
        assert second.action == ToggleAction.UNCHANGED
        assert second.is_active is True
        assert second.count == 1

    @pytest.mark.asyncio
    async def test_view_is_silent_and_counted_once(self, unit_env):
        interact = await unit_env.get(InteractUseCase)
        loop_service = await unit_env.get(LoopService)
        notification_repo = await unit_env.get(NotificationRepository)

        author_id = new_user_id()
        loop = await loop_service.create_root(author_id, text())
        request = InteractRequest(
            user_id=str(new_user_id()),
            loop_id=str(loop.id),
            interaction_type=InteractionType.VIEW,
        )

        await interact.execute(request)
        response = await interact.execute(request)

        assert response.stats.views == 1
        assert await notification_repo.find_by_recipient(author_id) == []

    @pytest.mark.asyncio
    async def test_share_notifies_author(self, unit_env):
        interact = await unit_env.get(InteractUseCase)
        loop_service = await unit_env.get(LoopService)
        notification_repo = await unit_env.get(NotificationRepository)

        author_id = new_user_id()
        loop = await loop_service.create_root(author_id, text())

        await interact.execute(
            InteractRequest(
                user_id=str(new_user_id()),
                loop_id=str(loop.id),
                interaction_type=InteractionType.SHARE,
            )
        )

        notifications = await notification_repo.find_by_recipient(author_id)
        assert [n.type for n in notifications] == [NotificationType.SHARE]
        assert notifications[0].title == "Someone shared your loop"

    @pytest.mark.asyncio
    async def test_own_like_does_not_notify(self, unit_env):
        interact = await unit_env.get(InteractUseCase)
        loop_service = await unit_env.get(LoopService)
        notification_repo = await unit_env.get(NotificationRepository)

        author_id = new_user_id()
        loop = await loop_service.create_root(author_id, text())

        await interact.execute(
            InteractRequest(
                user_id=str(author_id),
                loop_id=str(loop.id),
                interaction_type=InteractionType.LIKE,
            )
        )

        assert await notification_repo.find_by_recipient(author_id) == []

    @pytest.mark.asyncio
    async def test_removing_a_view_is_rejected(self, unit_env):
        interact = await unit_env.get(InteractUseCase)
        loop_service = await unit_env.get(LoopService)

        loop = await loop_service.create_root(new_user_id(), text())

        with pytest.raises(ValidationError):
            await interact.execute(
                InteractRequest(
                    user_id=str(new_user_id()),
                    loop_id=str(loop.id),
                    interaction_type=InteractionType.VIEW,
                    action="remove",
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_loop_raises_not_found(self, unit_env):
        interact = await unit_env.get(InteractUseCase)

        with pytest.raises(NotFoundError):
            await interact.execute(
                InteractRequest(
                    user_id=str(new_user_id()),
                    loop_id=str(uuid4()),
                    interaction_type=InteractionType.LIKE,
                )
            )

    @pytest.mark.asyncio
    async def test_get_interactions_reports_viewer_state(self, unit_env):
        interact = await unit_env.get(InteractUseCase)
        get_interactions = await unit_env.get(GetInteractionsUseCase)
        loop_service = await unit_env.get(LoopService)

        viewer = new_user_id()
        loop = await loop_service.create_root(new_user_id(), text())
        await interact.execute(
            InteractRequest(
                user_id=str(viewer),
                loop_id=str(loop.id),
                interaction_type=InteractionType.LIKE,
            )
        )

        mine = await get_interactions.execute(
            GetInteractionsRequest(loop_id=str(loop.id), viewer_id=str(viewer))
        )
        anonymous = await get_interactions.execute(
            GetInteractionsRequest(loop_id=str(loop.id))
        )

        assert mine.stats.likes == 1
        assert mine.viewer.is_liked is True
        assert anonymous.viewer.is_liked is False
