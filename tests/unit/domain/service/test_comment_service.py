"""Unit tests for CommentService."""

import pytest

from loop.domain.error import ForbiddenError, NotFoundError, ValidationError
from loop.domain.repository import NotificationRepository, ProfileRepository
from loop.domain.service import CommentService, CounterService, LoopService
from loop.domain.value import CommentId, LoopId, NotificationType
from tests.conftest import make_profile, new_user_id, text
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for comment creation."""

    @pytest.mark.asyncio
    async def test_comment_bumps_counter_and_notifies_author(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)
        counter_service = await unit_env.get(CounterService)
        notification_repo = await unit_env.get(NotificationRepository)
        profile_repo = await unit_env.get(ProfileRepository)

        commenter = await make_profile(profile_repo, "carol", display_name="Carol")
        author_id = new_user_id()
        loop = await loop_service.create_root(author_id, text())

        comment = await comment_service.create(loop.id, commenter.id, "  great loop  ")

        assert comment.text == "great loop"
        stats = await counter_service.get_stats(loop.id)
        assert stats.comments == 1
        notifications = await notification_repo.find_by_recipient(author_id)
        assert notifications[0].type == NotificationType.COMMENT
        assert notifications[0].title == "Carol commented on your loop"

    @pytest.mark.asyncio
    async def test_reply_notifies_parent_author(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)

        author_id, first, second = new_user_id(), new_user_id(), new_user_id()
        loop = await loop_service.create_root(author_id, text())
        parent = await comment_service.create(loop.id, first, "first")

        reply = await comment_service.create(loop.id, second, "reply", parent.id)

        assert reply.parent_id == parent.id
        notifications = await notification_repo.find_by_recipient(first)
        assert [n.type for n in notifications] == [NotificationType.REPLY]

    @pytest.mark.asyncio
    async def test_reply_to_reply_joins_thread(self, unit_env):
        """Threads are one level deep."""
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)

        loop = await loop_service.create_root(new_user_id(), text())
        top = await comment_service.create(loop.id, new_user_id(), "top")
        reply = await comment_service.create(loop.id, new_user_id(), "reply", top.id)

        nested = await comment_service.create(loop.id, new_user_id(), "nested", reply.id)

        assert nested.parent_id == top.id
        threads = await comment_service.list_threads(loop.id)
        assert len(threads) == 1
        assert [c.id for c in threads[0].replies] == [reply.id, nested.id]

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)

        loop = await loop_service.create_root(new_user_id(), text())

        with pytest.raises(ValidationError):
            await comment_service.create(loop.id, new_user_id(), "   ")

    @pytest.mark.asyncio
    async def test_parent_on_other_loop_is_rejected(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)

        one = await loop_service.create_root(new_user_id(), text())
        other = await loop_service.create_root(new_user_id(), text())
        parent = await comment_service.create(one.id, new_user_id(), "hi")

        with pytest.raises(ValidationError):
            await comment_service.create(other.id, new_user_id(), "x", parent.id)

    @pytest.mark.asyncio
    async def test_comment_on_missing_loop_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create(LoopId(new_user_id()), new_user_id(), "hi")


class TestDeleteComment:
    """Tests for comment deletion."""

    @pytest.mark.asyncio
    async def test_delete_thread_decrements_by_removed_count(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)
        counter_service = await unit_env.get(CounterService)

        loop = await loop_service.create_root(new_user_id(), text())
        commenter = new_user_id()
        top = await comment_service.create(loop.id, commenter, "top")
        await comment_service.create(loop.id, new_user_id(), "reply", top.id)
        await comment_service.create(loop.id, new_user_id(), "other")

        removed = await comment_service.delete(loop.id, top.id, commenter)

        assert removed == 2
        stats = await counter_service.get_stats(loop.id)
        assert stats.comments == 1

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)

        loop = await loop_service.create_root(new_user_id(), text())
        comment = await comment_service.create(loop.id, new_user_id(), "mine")

        with pytest.raises(ForbiddenError):
            await comment_service.delete(loop.id, comment.id, new_user_id())

    @pytest.mark.asyncio
    async def test_delete_unknown_comment_raises_not_found(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        comment_service = await unit_env.get(CommentService)

        loop = await loop_service.create_root(new_user_id(), text())

        with pytest.raises(NotFoundError):
            await comment_service.delete(
                loop.id, CommentId(new_user_id()), new_user_id()
            )
