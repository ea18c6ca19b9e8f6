"""Notification entity."""

from datetime import datetime

from pydantic import Field

from opinion.domain.model.common import DomainModel
from opinion.domain.value import NotificationId, UserId


class Notification(DomainModel):
    """In-app notification addressed to a single user.

    ``content`` is an HTML fragment with links back to the article and the
    acting user's profile.
    """

    id: NotificationId
    recipient_id: UserId
    title: str = Field(min_length=1, max_length=255)
    content: str
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
