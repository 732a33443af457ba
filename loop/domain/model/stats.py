"""Interaction counters for a loop."""

from pydantic import Field

from loop.domain.model.common import DomainModel
from loop.domain.value import CounterName, LoopId


class LoopStats(DomainModel):
    """Denormalized counters, one row per loop.

    Only the counter service writes these. All counters stay non-negative.
    """

    loop_id: LoopId
    likes: int = Field(default=0, ge=0)
    branches: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    saves: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)

    def get(self, counter: CounterName) -> int:
        return getattr(self, counter.value)

    @classmethod
    def empty(cls, loop_id: LoopId) -> "LoopStats":
        return cls(loop_id=loop_id)
