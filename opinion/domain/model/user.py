"""User entity.

Users are managed by the account subsystem; comments only read them to
identify authors and resolve mentions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from opinion.domain.model.common import DomainModel
from opinion.domain.value import Nickname, UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    nickname: Nickname
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
