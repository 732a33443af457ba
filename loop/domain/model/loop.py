"""Loop aggregate root.

Loops are the content nodes of the platform. A loop is either a root
(depth 0, no parent) or a branch of another loop, forming a tree whose
depth is capped at MAX_BRANCH_DEPTH.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from loop.domain.model.common import DomainModel
from loop.domain.value import CircleId, LoopContent, LoopId, UserId, Visibility

MAX_BRANCH_DEPTH = 10


class Loop(DomainModel):
    """Loop aggregate root.

    Business rules:
    - parent_id and depth are fixed at creation
    - Roots have depth 0, branches have parent depth + 1
    - Branches inherit the circle of their parent
    """

    id: LoopId
    author_id: UserId
    parent_id: Optional[LoopId] = None
    depth: int = Field(default=0, ge=0, le=MAX_BRANCH_DEPTH)
    content: LoopContent
    circle_id: Optional[CircleId] = None
    visibility: Visibility = Visibility.PUBLIC
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_tree_position(self) -> "Loop":
        """Roots sit at depth 0 and branches below it."""
        if self.parent_id is None and self.depth != 0:
            raise ValueError("Root loops must have depth 0")
        if self.parent_id is not None and self.depth == 0:
            raise ValueError("Branches must have depth of at least 1")
        return self

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def can_branch(self) -> bool:
        """Whether another level of branching fits below this loop."""
        return self.depth < MAX_BRANCH_DEPTH
