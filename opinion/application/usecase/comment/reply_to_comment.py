"""Reply to comment use case."""

from uuid import UUID

from pydantic import BaseModel

from opinion.domain.service import CommentService, NotificationService, UserService
from opinion.domain.value import CommentId

from .common import CommentItem, require_user


class ReplyToCommentRequest(BaseModel):
    """Reply to comment request."""

    comment_id: str  # Parent comment UUID string
    text: str
    author_id: str  # User ID from authenticated user


class ReplyToCommentUseCase:
    """Use case for replying to a root comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: ReplyToCommentRequest) -> CommentItem:
        """Execute reply flow.

        Raises:
            NotFoundError: If the user or the parent comment does not exist
            ExceedsNestingLevelError: If the parent comment is a reply
        """
        author = await require_user(self.user_service, request.author_id)

        created = await self.comment_service.reply_to_comment(
            parent_id=CommentId(UUID(request.comment_id)),
            text=request.text,
            author=author,
        )
        await self.notification_service.dispatch(created.notifications)

        return CommentItem.from_comment(created.comment)
