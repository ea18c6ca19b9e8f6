"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .mark_notification_read import (
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
    "NotificationItem",
]
