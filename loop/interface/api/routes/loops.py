"""Loop routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from loop.application.usecase.feed import (
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
)
from loop.application.usecase.loop import (
    CreateBranchRequest,
    CreateBranchResponse,
    CreateBranchUseCase,
    CreateLoopRequest,
    CreateLoopResponse,
    CreateLoopUseCase,
    DeleteLoopRequest,
    DeleteLoopResponse,
    DeleteLoopUseCase,
    GetLoopRequest,
    GetLoopResponse,
    GetLoopUseCase,
    ListBranchesRequest,
    ListBranchesResponse,
    ListBranchesUseCase,
)
from loop.domain.service import AuthService
from loop.domain.value import FeedMode, LoopContent, Visibility
from loop.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(prefix="/loops", tags=["loops"], route_class=DishkaRoute)


class CreateLoopAPIRequest(BaseModel):
    """API request for creating a root loop."""

    content: LoopContent
    circle_id: Optional[str] = None
    visibility: Visibility = Visibility.PUBLIC


class CreateBranchAPIRequest(BaseModel):
    """API request for branching from a loop."""

    parent_id: str
    content: LoopContent


@router.post(
    "", response_model=CreateLoopResponse, status_code=status.HTTP_201_CREATED
)
async def create_loop(
    request: CreateLoopAPIRequest,
    create_loop_use_case: FromDishka[CreateLoopUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreateLoopResponse:
    """Create a root loop.

    Requires authentication.

    Args:
        request: Loop content and placement
        create_loop_use_case: Create loop use case from DI
        auth_service: Auth service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Created loop with zeroed counters
    """
    user_id = await require_user_id(auth_service, authorization)
    return await create_loop_use_case.execute(
        CreateLoopRequest(
            author_id=user_id,
            content=request.content,
            circle_id=request.circle_id,
            visibility=request.visibility,
        )
    )


@router.post(
    "/branch",
    response_model=CreateBranchResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_branch(
    request: CreateBranchAPIRequest,
    create_branch_use_case: FromDishka[CreateBranchUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreateBranchResponse:
    """Branch from an existing loop.

    Requires authentication. Fails with 404 when the parent is missing and
    with 400 when the parent already sits at the maximum depth.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await create_branch_use_case.execute(
        CreateBranchRequest(
            author_id=user_id,
            parent_id=request.parent_id,
            content=request.content,
        )
    )


# Declared before /{loop_id} so "feed" is not taken for an id
@router.get("/feed", response_model=GetFeedResponse)
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    auth_service: FromDishka[AuthService],
    type: FeedMode = FeedMode.RECENT,
    limit: Optional[int] = None,
    offset: int = 0,
    authorization: str | None = Header(default=None),
) -> GetFeedResponse:
    """Read a feed page.

    `following` and `personalized` need an authenticated viewer; `recent`
    and `trending` work anonymously.

    Args:
        get_feed_use_case: Get feed use case from DI
        auth_service: Auth service for token verification (injected)
        type: Feed mode
        limit: Page size
        offset: Number of items to skip
        authorization: Bearer token header (optional)
    """
    viewer_id = await optional_user_id(auth_service, authorization)
    if type in (FeedMode.FOLLOWING, FeedMode.PERSONALIZED):
        viewer_id = await require_user_id(auth_service, authorization)

    return await get_feed_use_case.execute(
        GetFeedRequest(viewer_id=viewer_id, type=type, limit=limit, offset=offset)
    )


@router.get("/{loop_id}", response_model=GetLoopResponse)
async def get_loop(
    loop_id: str,
    get_loop_use_case: FromDishka[GetLoopUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> GetLoopResponse:
    """Get a loop with its counters and the viewer's state."""
    viewer_id = await optional_user_id(auth_service, authorization)
    return await get_loop_use_case.execute(
        GetLoopRequest(loop_id=loop_id, viewer_id=viewer_id)
    )


@router.delete("/{loop_id}", response_model=DeleteLoopResponse)
async def delete_loop(
    loop_id: str,
    delete_loop_use_case: FromDishka[DeleteLoopUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> DeleteLoopResponse:
    """Delete a loop and its whole subtree.

    Requires authentication as the author or a moderator.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await delete_loop_use_case.execute(
        DeleteLoopRequest(loop_id=loop_id, requester_id=user_id)
    )


@router.get("/{loop_id}/branches", response_model=ListBranchesResponse)
async def list_branches(
    loop_id: str,
    list_branches_use_case: FromDishka[ListBranchesUseCase],
    auth_service: FromDishka[AuthService],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListBranchesResponse:
    """List the direct branches of a loop, oldest first."""
    viewer_id = await optional_user_id(auth_service, authorization)
    return await list_branches_use_case.execute(
        ListBranchesRequest(
            loop_id=loop_id, viewer_id=viewer_id, limit=limit, offset=offset
        )
    )
