"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import AliasChoices, BaseModel, Field

from loop.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from loop.domain.service import AuthService
from loop.interface.api.auth import require_user_id

router = APIRouter(prefix="/loops", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(
        max_length=2000, validation_alias=AliasChoices("content", "text")
    )
    parent_id: Optional[str] = None


@router.get("/{loop_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    loop_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """List comment threads of a loop.

    Top-level comments come newest first, replies oldest first.
    """
    return await list_comments_use_case.execute(ListCommentsRequest(loop_id=loop_id))


@router.post(
    "/{loop_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    loop_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a loop, or reply to a comment with `parent_id`.

    Requires authentication.

    Args:
        loop_id: Loop UUID
        request: Comment text and optional parent comment
        create_comment_use_case: Create comment use case from DI
        auth_service: Auth service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Created comment
    """
    user_id = await require_user_id(auth_service, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            loop_id=loop_id,
            author_id=user_id,
            text=request.content,
            parent_id=request.parent_id,
        )
    )


@router.delete("/{loop_id}/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    loop_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and its replies.

    Requires authentication as the comment author or a moderator.
    """
    user_id = await require_user_id(auth_service, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            loop_id=loop_id, comment_id=comment_id, requester_id=user_id
        )
    )
