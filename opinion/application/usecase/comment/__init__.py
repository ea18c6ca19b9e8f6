"""Comment use cases."""

from .common import CommentItem
from .count_comments import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import (
    CommentThreadItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .reply_to_comment import ReplyToCommentRequest, ReplyToCommentUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CommentThreadItem",
    "CountCommentsRequest",
    "CountCommentsResponse",
    "CountCommentsUseCase",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ReplyToCommentRequest",
    "ReplyToCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
