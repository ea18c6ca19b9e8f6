"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from opinion.domain.model import Notification
from opinion.domain.service import NotificationService
from opinion.domain.value import UserId


class NotificationItem(BaseModel):
    """Notification item in responses."""

    notification_id: str
    title: str
    content: str
    date_time: datetime
    is_read: bool

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            notification_id=str(notification.id),
            title=notification.title,
            content=notification.content,
            date_time=notification.created_at,
            is_read=notification.is_read,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Current user ID
    limit: int = 50
    offset: int = 0


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread: int


class ListNotificationsUseCase:
    """Use case for reading the current user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Return the user's notifications, newest first."""
        notifications = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id)),
            limit=request.limit,
            offset=request.offset,
        )
        items = [NotificationItem.from_notification(n) for n in notifications]
        return ListNotificationsResponse(
            notifications=items,
            unread=sum(1 for item in items if not item.is_read),
        )
