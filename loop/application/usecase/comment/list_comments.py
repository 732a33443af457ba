"""List comments use case."""

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.application.usecase.comment.view import CommentItem
from loop.domain.service import CommentService, ProfileService
from loop.domain.value import LoopId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    loop_id: str


class CommentThreadItem(BaseModel):
    """Top-level comment with its replies."""

    comment: CommentItem
    replies: list[CommentItem]


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentThreadItem]
    total: int  # Comments across all threads, replies included


class ListCommentsUseCase:
    """Use case for reading the comment threads of a loop."""

    def __init__(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> None:
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        threads = await self.comment_service.list_threads(
            LoopId(parse_id(request.loop_id, "loop_id"))
        )

        # One profile query for every author on the page
        author_ids = [thread.comment.author_id for thread in threads]
        author_ids += [reply.author_id for thread in threads for reply in thread.replies]
        authors = await self.profile_service.get_many(author_ids)

        items = [
            CommentThreadItem(
                comment=CommentItem.from_comment(
                    thread.comment, authors.get(thread.comment.author_id)
                ),
                replies=[
                    CommentItem.from_comment(reply, authors.get(reply.author_id))
                    for reply in thread.replies
                ],
            )
            for thread in threads
        ]
        total = sum(1 + len(thread.replies) for thread in threads)
        return ListCommentsResponse(comments=items, total=total)
