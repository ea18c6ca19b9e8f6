"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from opinion.domain.service import CommentService, UserService
from opinion.domain.value import CommentId

from .common import require_user


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the user or the comment does not exist
            NoAccessError: If the user doesn't own the comment
        """
        requester = await require_user(self.user_service, request.user_id)
        await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester=requester,
        )
