"""Response models for circle use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from loop.domain.model import Circle


class CircleInfo(BaseModel):
    """Circle as returned by the API."""

    id: str
    name: str
    description: Optional[str]
    owner_id: str
    member_count: int
    created_at: datetime

    @classmethod
    def from_circle(cls, circle: Circle) -> "CircleInfo":
        return cls(
            id=str(circle.id),
            name=circle.name,
            description=circle.description,
            owner_id=str(circle.owner_id),
            member_count=circle.member_count,
            created_at=circle.created_at,
        )
