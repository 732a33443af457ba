"""Feed assembly domain service."""

from datetime import datetime, timedelta
from typing import Optional, Sequence

import logfire

from loop.config import FeedSettings, RankingSettings
from loop.domain.error import ValidationError
from loop.domain.model.feed import FeedPage, LoopView
from loop.domain.model.loop import Loop
from loop.domain.repository import FollowRepository, LoopRepository
from loop.domain.value import FeedMode, TrendingWeights, UserId

from .base import Service
from .counter_service import CounterService


class FeedService(Service):
    """Builds feed pages and loop views.

    Every page is stitched together from one loop query, one batched stats
    lookup and one batched viewer-state lookup.
    """

    def __init__(
        self,
        loop_repository: LoopRepository,
        follow_repository: FollowRepository,
        counter_service: CounterService,
        feed_settings: FeedSettings,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize feed service.

        Args:
            loop_repository: Loop repository
            follow_repository: Follow repository
            counter_service: Stats and viewer state lookups
            feed_settings: Page size limits
            ranking_settings: Trending window and weights
        """
        self.loop_repository = loop_repository
        self.follow_repository = follow_repository
        self.counter_service = counter_service
        self.feed_settings = feed_settings
        self.ranking_settings = ranking_settings

    @property
    def trending_weights(self) -> TrendingWeights:
        r = self.ranking_settings
        return TrendingWeights(
            like=r.like_weight,
            save=r.save_weight,
            share=r.share_weight,
            view=r.view_weight,
            branch=r.branch_weight,
            comment=r.comment_weight,
        )

    async def assemble(
        self,
        viewer_id: Optional[UserId],
        mode: FeedMode,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> FeedPage:
        """Assemble one page of a feed.

        Args:
            viewer_id: Viewing user (None for anonymous, only recent/trending)
            mode: Feed mode
            limit: Page size (1..max_limit, default from settings)
            offset: Number of items to skip

        Returns:
            Feed page with per-item stats and viewer state

        Raises:
            ValidationError: If paging is out of range or the mode needs a viewer
        """
        limit = self.feed_settings.default_limit if limit is None else limit
        if not 1 <= limit <= self.feed_settings.max_limit:
            raise ValidationError(
                f"limit must be between 1 and {self.feed_settings.max_limit}"
            )
        if offset < 0:
            raise ValidationError("offset must not be negative")

        with logfire.span(
            "feed_service.assemble",
            viewer_id=str(viewer_id) if viewer_id else None,
            mode=mode.value,
            limit=limit,
            offset=offset,
        ):
            loops = await self._select(viewer_id, mode, limit, offset)
            items = await self.views(viewer_id, loops)

            logfire.info("Feed assembled", mode=mode.value, items=len(items))
            return FeedPage(
                mode=mode,
                items=items,
                limit=limit,
                offset=offset,
                has_more=len(items) == limit,
            )

    async def search(
        self,
        viewer_id: Optional[UserId],
        query: str,
        limit: int = 20,
        offset: int = 0,
    ) -> list[LoopView]:
        """Public loops whose text contains `query`, as views."""
        with logfire.span("feed_service.search", query=query, limit=limit):
            loops = await self.loop_repository.search_public(query, limit, offset)
            return await self.views(viewer_id, loops)

    async def views(
        self, viewer_id: Optional[UserId], loops: Sequence[Loop]
    ) -> list[LoopView]:
        """Attach stats and viewer state to loops, preserving order."""
        if not loops:
            return []

        loop_ids = [loop.id for loop in loops]
        stats = await self.counter_service.get_stats_many(loop_ids)
        states = await self.counter_service.viewer_state(viewer_id, loop_ids)

        return [
            LoopView(loop=loop, stats=stats[loop.id], viewer=states[loop.id])
            for loop in loops
        ]

    async def view(self, viewer_id: Optional[UserId], loop: Loop) -> LoopView:
        """Single-loop variant of `views`."""
        return (await self.views(viewer_id, [loop]))[0]

    async def _select(
        self, viewer_id: Optional[UserId], mode: FeedMode, limit: int, offset: int
    ) -> list[Loop]:
        if mode == FeedMode.RECENT:
            return await self.loop_repository.find_public_roots(
                None, limit=limit, offset=offset
            )

        if mode == FeedMode.TRENDING:
            since = datetime.now() - timedelta(
                hours=self.ranking_settings.trending_window_hours
            )
            return await self.loop_repository.find_trending(
                since, self.trending_weights, limit=limit, offset=offset
            )

        if viewer_id is None:
            raise ValidationError(f"{mode.value} feed requires a signed-in viewer")

        following = await self.follow_repository.find_following_ids(viewer_id)
        if mode == FeedMode.PERSONALIZED:
            author_ids = list(dict.fromkeys([*following, viewer_id]))
        else:
            author_ids = following

        if not author_ids:
            return []

        return await self.loop_repository.find_public_roots(
            author_ids, limit=limit, offset=offset
        )
