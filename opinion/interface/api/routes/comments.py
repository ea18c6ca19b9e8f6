"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, Response, status
from pydantic import BaseModel, Field

from opinion.application.usecase.comment import (
    CommentItem,
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ReplyToCommentRequest,
    ReplyToCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from opinion.domain.error import ExceedsNestingLevelError, NoAccessError, NotFoundError
from opinion.domain.service import JWTService
from opinion.interface.api.auth import require_user_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentTextAPIRequest(BaseModel):
    """API request body carrying comment text."""

    text: str = Field(min_length=1, max_length=10000)


@router.get("/articles/{article_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    article_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, ge=1, le=100),
) -> GetCommentsResponse:
    """Get a page of root comments of an article, each with its replies.

    Args:
        article_id: Article UUID
        get_comments_use_case: Get comments use case from DI
        page: Zero-based page number
        size: Root comments per page (configured default if omitted)

    Returns:
        Root comments oldest first, with nested replies

    Raises:
        HTTPException: 404 if the article does not exist
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(article_id=str(article_id), page=page, size=size)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "/articles/{article_id}/comments/count", response_model=CountCommentsResponse
)
async def count_comments(
    article_id: UUID,
    count_comments_use_case: FromDishka[CountCommentsUseCase],
) -> CountCommentsResponse:
    """Count all comments (roots and replies) of an article."""
    return await count_comments_use_case.execute(
        CountCommentsRequest(article_id=str(article_id))
    )


@router.post(
    "/articles/{article_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    article_id: UUID,
    request: CommentTextAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Leave a root comment under an article.

    Requires authentication. Mentioned users and the article author are
    notified.

    Args:
        article_id: Article UUID
        request: Comment text
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: 401 if not authenticated, 404 if article or user is missing
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                article_id=str(article_id),
                text=request.text,
                author_id=user_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/comments/{comment_id}/replies",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: UUID,
    request: CommentTextAPIRequest,
    reply_to_comment_use_case: FromDishka[ReplyToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Reply to a root comment.

    Replies cannot be replied to.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the comment is missing,
            400 if the comment is itself a reply
    """
    user_id = require_user_id(jwt_service, auth_token, "reply to comments")

    try:
        return await reply_to_comment_use_case.execute(
            ReplyToCommentRequest(
                comment_id=str(comment_id),
                text=request.text,
                author_id=user_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Reply failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ExceedsNestingLevelError as e:
        logfire.warn("Reply rejected - nesting level", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: UUID,
    request: CommentTextAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Update a comment's text content.

    Only the comment author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the comment is missing,
            400 if the user is not the author
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment_id), user_id=user_id, text=request.text
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NoAccessError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a comment and its replies.

    Only the comment author can delete.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the comment is missing,
            400 if the user is not the author
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NoAccessError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)
