"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .mention import extract_mentions
from .nesting import can_reply_to, check_nesting_level
from .notification_service import NotificationService
from .user_service import UserService

__all__ = [
    "CommentService",
    "JWTService",
    "NotificationService",
    "Service",
    "UserService",
    "can_reply_to",
    "check_nesting_level",
    "extract_mentions",
]
