"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from opinion.domain.model import Article, Comment, Notification, User
from opinion.domain.value import (
    ArticleId,
    CommentId,
    Nickname,
    NotificationId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        nickname=Nickname(row["nickname"]),
        email=row.get("email"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])),
        author_nickname=Nickname(row["author_nickname"]),
        created_at=row["created_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return article.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_nickname=Nickname(row["author_nickname"]),
        text=row["text"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        altered=row["altered"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        title=row["title"],
        content=row["content"],
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return notification.model_dump()
