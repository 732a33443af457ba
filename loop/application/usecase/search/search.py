"""Search use case."""

from typing import Optional

from pydantic import BaseModel, Field

from loop.application.usecase.base import parse_id
from loop.application.usecase.loop.view import LoopItem
from loop.application.usecase.user.view import ProfileInfo
from loop.domain.error import ValidationError
from loop.domain.service import FeedService, ProfileService
from loop.domain.value import SearchScope, UserId

MIN_QUERY_LENGTH = 2


class SearchRequest(BaseModel):
    """Search request."""

    q: str = Field(max_length=100)
    scope: SearchScope = SearchScope.ALL
    limit: int = Field(default=20, ge=1, le=50)
    offset: int = Field(default=0, ge=0)
    viewer_id: Optional[str] = None


class SearchResponse(BaseModel):
    """Search response. Each section is paged independently."""

    query: str
    loops: list[LoopItem]
    users: list[ProfileInfo]
    total: int


class SearchUseCase:
    """Use case for substring search over public loops and profiles."""

    def __init__(
        self, feed_service: FeedService, profile_service: ProfileService
    ) -> None:
        self.feed_service = feed_service
        self.profile_service = profile_service

    async def execute(self, request: SearchRequest) -> SearchResponse:
        """Execute search flow.

        Raises:
            ValidationError: If the query is shorter than two characters
        """
        query = request.q.strip()
        if len(query) < MIN_QUERY_LENGTH:
            raise ValidationError(
                f"Search query must be at least {MIN_QUERY_LENGTH} characters"
            )
        viewer_id = (
            UserId(parse_id(request.viewer_id, "viewer_id"))
            if request.viewer_id
            else None
        )

        loops: list[LoopItem] = []
        users: list[ProfileInfo] = []
        if request.scope in (SearchScope.ALL, SearchScope.LOOPS):
            views = await self.feed_service.search(
                viewer_id, query, request.limit, request.offset
            )
            loops = [LoopItem.from_view(view) for view in views]
        if request.scope in (SearchScope.ALL, SearchScope.USERS):
            profiles = await self.profile_service.search(
                query, request.limit, request.offset
            )
            users = [ProfileInfo.from_profile(p) for p in profiles]

        return SearchResponse(
            query=query, loops=loops, users=users, total=len(loops) + len(users)
        )
