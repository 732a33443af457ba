"""Unit tests for FeedService."""

import pytest

from loop.domain.error import ValidationError
from loop.domain.service import (
    CommentService,
    CounterService,
    FeedService,
    FollowService,
    LoopService,
)
from loop.domain.value import FeedMode, InteractionType, Visibility
from tests.conftest import new_user_id, text
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecentFeed:
    """Tests for the recent feed."""

    @pytest.mark.asyncio
    async def test_recent_contains_public_roots_only(self, unit_env):
        """Branches and private loops never show up in feeds."""
        loop_service = await unit_env.get(LoopService)
        feed_service = await unit_env.get(FeedService)

        author_id = new_user_id()
        public = await loop_service.create_root(author_id, text("public"))
        await loop_service.create_root(
            author_id, text("private"), visibility=Visibility.PRIVATE
        )
        await loop_service.create_branch(author_id, public.id, text("branch"))

        page = await feed_service.assemble(None, FeedMode.RECENT)

        assert [item.loop.id for item in page.items] == [public.id]
        assert page.items[0].stats.branches == 1
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_has_more_when_page_is_full(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        feed_service = await unit_env.get(FeedService)

        for i in range(3):
            await loop_service.create_root(new_user_id(), text(f"loop {i}"))

        first = await feed_service.assemble(None, FeedMode.RECENT, limit=2)
        second = await feed_service.assemble(None, FeedMode.RECENT, limit=2, offset=2)

        assert len(first.items) == 2
        assert first.has_more is True
        assert len(second.items) == 1
        assert second.has_more is False

    @pytest.mark.asyncio
    async def test_limit_out_of_range_is_rejected(self, unit_env):
        feed_service = await unit_env.get(FeedService)

        with pytest.raises(ValidationError):
            await feed_service.assemble(None, FeedMode.RECENT, limit=0)
        with pytest.raises(ValidationError):
            await feed_service.assemble(None, FeedMode.RECENT, limit=101)
        with pytest.raises(ValidationError):
            await feed_service.assemble(None, FeedMode.RECENT, offset=-1)

    @pytest.mark.asyncio
    async def test_viewer_state_is_attached(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)
        feed_service = await unit_env.get(FeedService)

        viewer = new_user_id()
        loop = await loop_service.create_root(new_user_id(), text())
        await counter_service.toggle(viewer, loop.id, InteractionType.LIKE)

        page = await feed_service.assemble(viewer, FeedMode.RECENT)

        assert page.items[0].viewer.is_liked is True
        assert page.items[0].stats.likes == 1


class TestFollowingFeeds:
    """Tests for following and personalized feeds."""

    @pytest.mark.asyncio
    async def test_following_feed_shows_followed_authors(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        follow_service = await unit_env.get(FollowService)
        feed_service = await unit_env.get(FeedService)

        viewer, followed, stranger = new_user_id(), new_user_id(), new_user_id()
        await follow_service.follow(viewer, followed)

        wanted = await loop_service.create_root(followed, text("followed"))
        await loop_service.create_root(stranger, text("stranger"))
        await loop_service.create_root(viewer, text("mine"))

        page = await feed_service.assemble(viewer, FeedMode.FOLLOWING)

        assert [item.loop.id for item in page.items] == [wanted.id]

    @pytest.mark.asyncio
    async def test_personalized_feed_includes_own_loops(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        follow_service = await unit_env.get(FollowService)
        feed_service = await unit_env.get(FeedService)

        viewer, followed, stranger = new_user_id(), new_user_id(), new_user_id()
        await follow_service.follow(viewer, followed)

        theirs = await loop_service.create_root(followed, text("followed"))
        mine = await loop_service.create_root(viewer, text("mine"))
        await loop_service.create_root(stranger, text("stranger"))

        page = await feed_service.assemble(viewer, FeedMode.PERSONALIZED)

        assert {item.loop.id for item in page.items} == {theirs.id, mine.id}

    @pytest.mark.asyncio
    async def test_following_feed_is_empty_without_follows(self, unit_env):
        loop_service = await unit_env.get(LoopService)
        feed_service = await unit_env.get(FeedService)

        await loop_service.create_root(new_user_id(), text())

        page = await feed_service.assemble(new_user_id(), FeedMode.FOLLOWING)

        assert page.items == []
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_following_feed_requires_viewer(self, unit_env):
        feed_service = await unit_env.get(FeedService)

        with pytest.raises(ValidationError):
            await feed_service.assemble(None, FeedMode.FOLLOWING)


class TestTrendingFeed:
    """Tests for trending ranking."""

    @pytest.mark.asyncio
    async def test_trending_orders_by_weighted_activity(self, unit_env):
        """Branches and comments outweigh a single like."""
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)
        comment_service = await unit_env.get(CommentService)
        feed_service = await unit_env.get(FeedService)

        quiet = await loop_service.create_root(new_user_id(), text("quiet"))
        liked = await loop_service.create_root(new_user_id(), text("liked"))
        busy = await loop_service.create_root(new_user_id(), text("busy"))

        await counter_service.toggle(new_user_id(), liked.id, InteractionType.LIKE)
        await loop_service.create_branch(new_user_id(), busy.id, text("branch"))
        await comment_service.create(busy.id, new_user_id(), "nice")

        page = await feed_service.assemble(None, FeedMode.TRENDING)

        assert [item.loop.id for item in page.items] == [busy.id, liked.id, quiet.id]
