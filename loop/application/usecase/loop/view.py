"""Response models shared by loop use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from loop.domain.model import LoopStats, LoopView, ViewerState
from loop.domain.value import LoopContent, Visibility


class LoopStatsInfo(BaseModel):
    """Loop counters for response."""

    likes: int
    branches: int
    comments: int
    saves: int
    views: int
    shares: int

    @classmethod
    def from_stats(cls, stats: LoopStats) -> "LoopStatsInfo":
        return cls(
            likes=stats.likes,
            branches=stats.branches,
            comments=stats.comments,
            saves=stats.saves,
            views=stats.views,
            shares=stats.shares,
        )


class ViewerStateInfo(BaseModel):
    """What the caller has done to a loop."""

    is_liked: bool = False
    is_saved: bool = False
    has_viewed: bool = False
    has_shared: bool = False

    @classmethod
    def from_state(cls, state: ViewerState) -> "ViewerStateInfo":
        return cls(
            is_liked=state.is_liked,
            is_saved=state.is_saved,
            has_viewed=state.has_viewed,
            has_shared=state.has_shared,
        )


class LoopItem(BaseModel):
    """Loop as returned by the API."""

    id: str
    author_id: str
    parent_id: Optional[str]
    depth: int
    content: LoopContent
    circle_id: Optional[str]
    visibility: Visibility
    created_at: datetime
    stats: LoopStatsInfo
    viewer: ViewerStateInfo

    @classmethod
    def from_view(cls, view: LoopView) -> "LoopItem":
        loop = view.loop
        return cls(
            id=str(loop.id),
            author_id=str(loop.author_id),
            parent_id=str(loop.parent_id) if loop.parent_id else None,
            depth=loop.depth,
            content=loop.content,
            circle_id=str(loop.circle_id) if loop.circle_id else None,
            visibility=loop.visibility,
            created_at=loop.created_at,
            stats=LoopStatsInfo.from_stats(view.stats),
            viewer=ViewerStateInfo.from_state(view.viewer),
        )
