"""Repository interfaces for the Opinion domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from opinion.domain.repository.article import ArticleRepository
from opinion.domain.repository.comment import CommentRepository
from opinion.domain.repository.notification import NotificationRepository
from opinion.domain.repository.user import UserRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "NotificationRepository",
    "UserRepository",
]
