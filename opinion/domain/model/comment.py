"""Comment entity.

Comments are threaded two levels deep: root comments attach directly to an
article and replies attach to a root comment. Replies to replies are not
allowed (see ``opinion.domain.service.nesting``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from opinion.domain.model.common import DomainModel
from opinion.domain.value import (
    ArticleId,
    CommentId,
    Nickname,
    PendingNotification,
    UserId,
)

MAX_COMMENT_DEPTH = 1


class Comment(DomainModel):
    """Comment entity.

    Represents a root comment on an article or a reply to a root comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for root comments)
    - depth: 0 for root comments, 1 for replies

    Replies are never stored on the record itself; they are looked up
    through the repository's parent index.
    """

    id: CommentId
    article_id: ArticleId
    author_id: UserId
    author_nickname: Nickname
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0, le=MAX_COMMENT_DEPTH)
    altered: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_threading(self) -> "Comment":
        """Root comments have no parent, replies always have one."""
        if self.depth == 0 and self.parent_id is not None:
            raise ValueError("Root comments cannot have a parent")
        if self.depth > 0 and self.parent_id is None:
            raise ValueError("Replies must reference a parent comment")
        return self

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


class CommentThread(DomainModel):
    """A root comment together with its replies, oldest first."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)


class CommentPage(DomainModel):
    """One page of root comment threads for an article."""

    items: list[CommentThread]
    page: int = Field(ge=0)
    size: int = Field(ge=1)
    total: int = Field(ge=0)  # Root comments on the article


class CommentCreated(DomainModel):
    """Result of creating a comment.

    ``notifications`` must be dispatched after the comment is persisted.
    """

    comment: Comment
    notifications: list[PendingNotification] = Field(default_factory=list)
