"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from opinion.domain.service import CommentService, NotificationService, UserService
from opinion.domain.value import ArticleId

from .common import CommentItem, require_user


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str  # UUID string
    text: str
    author_id: str  # User ID from authenticated user


class CreateCommentResponse(CommentItem):
    """Create comment response."""

    notifications_sent: int


class CreateCommentUseCase:
    """Use case for creating a root comment on an article."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            notification_service: Notification domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Load the authenticated user
        2. Create the comment (service checks the article exists)
        3. Dispatch mention and article-author notifications

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            NotFoundError: If the user or the article does not exist
        """
        author = await require_user(self.user_service, request.author_id)

        created = await self.comment_service.create_comment(
            article_id=ArticleId(UUID(request.article_id)),
            text=request.text,
            author=author,
        )

        # Comment is stored; notification failures must not undo it
        sent = await self.notification_service.dispatch(created.notifications)

        item = CommentItem.from_comment(created.comment)
        return CreateCommentResponse(**item.model_dump(), notifications_sent=sent)
