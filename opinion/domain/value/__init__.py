"""Domain value objects for Opinion."""

from opinion.domain.value.identifiers import (
    ArticleId,
    CommentId,
    NotificationId,
    UserId,
)
from opinion.domain.value.types import Nickname, PendingNotification

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    "NotificationId",
    # Types
    "Nickname",
    "PendingNotification",
]
