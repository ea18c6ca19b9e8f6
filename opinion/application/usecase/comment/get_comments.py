"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from opinion.config import CommentSettings
from opinion.domain.service import CommentService
from opinion.domain.value import ArticleId

from .common import CommentItem


class CommentThreadItem(CommentItem):
    """Root comment with its replies."""

    replies: list[CommentItem]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    article_id: str  # UUID string
    page: int = 0
    size: int | None = None  # Defaults to the configured page size


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: str
    items: list[CommentThreadItem]
    page: int
    size: int
    total: int  # Root comments on the article


class GetCommentsUseCase:
    """Use case for paging through an article's comment threads."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Default and maximum page sizes
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Article ID and paging parameters

        Returns:
            Root comments, oldest first, each with its replies

        Raises:
            NotFoundError: If the article does not exist
        """
        size = request.size or self.comment_settings.page_size
        size = min(size, self.comment_settings.max_page_size)
        page = max(request.page, 0)

        result = await self.comment_service.list_root_comments(
            article_id=ArticleId(UUID(request.article_id)),
            page=page,
            size=size,
        )

        items = [
            CommentThreadItem(
                **CommentItem.from_comment(thread.comment).model_dump(),
                replies=[CommentItem.from_comment(reply) for reply in thread.replies],
            )
            for thread in result.items
        ]

        return GetCommentsResponse(
            article_id=request.article_id,
            items=items,
            page=result.page,
            size=result.size,
            total=result.total,
        )
