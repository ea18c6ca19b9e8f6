"""Count comments use case."""

from uuid import UUID

from pydantic import BaseModel

from opinion.domain.service import CommentService
from opinion.domain.value import ArticleId


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    article_id: str  # UUID string


class CountCommentsResponse(BaseModel):
    """Count comments response."""

    article_id: str
    total: int


class CountCommentsUseCase:
    """Use case for counting all comments of an article."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        total = await self.comment_service.count_comments(
            ArticleId(UUID(request.article_id))
        )
        return CountCommentsResponse(article_id=request.article_id, total=total)
