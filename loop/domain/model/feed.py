"""Read models assembled for feeds and loop detail views."""

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.model.interaction import ViewerState
from loop.domain.model.loop import Loop
from loop.domain.model.stats import LoopStats
from loop.domain.value import FeedMode


class LoopView(DomainModel):
    """A loop with its counters and the viewer's interaction state."""

    loop: Loop
    stats: LoopStats
    viewer: ViewerState = Field(default_factory=ViewerState)


class FeedPage(DomainModel):
    """One page of a feed."""

    mode: FeedMode
    items: list[LoopView]
    limit: int
    offset: int
    has_more: bool
