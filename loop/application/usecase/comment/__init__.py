"""Comment use cases."""

from loop.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from loop.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from loop.application.usecase.comment.list_comments import (
    CommentThreadItem,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from loop.application.usecase.comment.view import AuthorInfo, CommentItem

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "AuthorInfo",
    "CommentItem",
    "CommentThreadItem",
]
