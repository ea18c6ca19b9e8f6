"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from opinion.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationItem,
)
from opinion.domain.error import NoAccessError, NotFoundError
from opinion.domain.service import JWTService
from opinion.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> ListNotificationsResponse:
    """List the current user's notifications, newest first."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id, limit=limit, offset=offset)
    )


@router.post("/{notification_id}/read", response_model=NotificationItem)
async def mark_notification_read(
    notification_id: UUID,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    """Mark one of the current user's notifications as read."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")

    try:
        return await mark_notification_read_use_case.execute(
            MarkNotificationReadRequest(
                notification_id=str(notification_id), user_id=user_id
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NoAccessError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
