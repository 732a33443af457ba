"""Search route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from loop.application.usecase.search import (
    SearchRequest,
    SearchResponse,
    SearchUseCase,
)
from loop.domain.service import AuthService
from loop.domain.value import SearchScope
from loop.interface.api.auth import optional_user_id

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


@router.get("", response_model=SearchResponse)
async def search(
    search_use_case: FromDishka[SearchUseCase],
    auth_service: FromDishka[AuthService],
    q: str = Query(max_length=100),
    scope: SearchScope = SearchScope.ALL,
    limit: int = Query(default=20, ge=1, le=50),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> SearchResponse:
    """Case-insensitive substring search over public loops and profiles.

    Anonymous callers may search; a signed-in viewer also gets their
    like/save state on each loop.
    """
    viewer_id = await optional_user_id(auth_service, authorization)
    return await search_use_case.execute(
        SearchRequest(
            q=q, scope=scope, limit=limit, offset=offset, viewer_id=viewer_id
        )
    )
