"""Domain model entities for Opinion."""

from opinion.domain.model.article import Article
from opinion.domain.model.comment import (
    Comment,
    CommentCreated,
    CommentPage,
    CommentThread,
)
from opinion.domain.model.notification import Notification
from opinion.domain.model.user import User

__all__ = [
    "User",
    "Article",
    "Comment",
    "CommentThread",
    "CommentPage",
    "CommentCreated",
    "Notification",
]
