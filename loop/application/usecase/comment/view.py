"""Response models for comment use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from loop.domain.model import Comment, Profile


class AuthorInfo(BaseModel):
    """Public author details shown next to a comment."""

    id: str
    username: str
    display_name: Optional[str]
    avatar_url: Optional[str]

    @classmethod
    def from_profile(cls, profile: Profile) -> "AuthorInfo":
        return cls(
            id=str(profile.id),
            username=profile.username.root,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
        )


class CommentItem(BaseModel):
    """Comment as returned by the API."""

    id: str
    loop_id: str
    author_id: str
    parent_id: Optional[str]
    text: str
    created_at: datetime
    author: Optional[AuthorInfo] = None

    @classmethod
    def from_comment(
        cls, comment: Comment, author: Optional[Profile] = None
    ) -> "CommentItem":
        return cls(
            id=str(comment.id),
            loop_id=str(comment.loop_id),
            author_id=str(comment.author_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            text=comment.text,
            created_at=comment.created_at,
            author=AuthorInfo.from_profile(author) if author else None,
        )
