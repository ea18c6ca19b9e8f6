"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from opinion.domain.service import CommentService, UserService
from opinion.domain.value import CommentId

from .common import CommentItem, require_user


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    text: str  # New text content


class UpdateCommentUseCase:
    """Use case for updating a comment's text content."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            user_service: User service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID and new text

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If the user or the comment does not exist
            NoAccessError: If the user doesn't own the comment
        """
        requester = await require_user(self.user_service, request.user_id)

        updated = await self.comment_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            text=request.text,
            requester=requester,
        )
        return CommentItem.from_comment(updated)
