"""Shared response models and helpers for comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from opinion.domain.error import NotFoundError
from opinion.domain.model import Comment, User
from opinion.domain.service import UserService
from opinion.domain.value import UserId


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    article_id: str
    author_id: str
    author_nickname: str
    text: str
    parent_id: str | None
    depth: int
    altered: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            author_id=str(comment.author_id),
            author_nickname=comment.author_nickname.root,
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            altered=comment.altered,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


async def require_user(user_service: UserService, user_id: str) -> User:
    """Load the acting user or raise NotFoundError.

    A token whose user ID is not a UUID cannot belong to any user.
    """
    try:
        parsed = UUID(user_id)
    except ValueError:
        raise NotFoundError("User", user_id)
    user = await user_service.get_user_by_id(UserId(parsed))
    if user is None:
        raise NotFoundError("User", user_id)
    return user
