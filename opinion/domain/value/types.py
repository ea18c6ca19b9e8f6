"""Domain value objects for Opinion.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import field_validator

from opinion.domain.value.common import RootValueObject, ValueObject
from opinion.domain.value.identifiers import UserId


class Nickname(RootValueObject[str]):
    """Public user nickname.

    Nicknames are what ``@mentions`` refer to, so they are restricted to
    word characters (letters, digits, underscore), 1-255 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_nickname(cls, v: str) -> str:
        """Validate nickname format."""
        if not re.fullmatch(r"\w{1,255}", v):
            raise ValueError("Nickname must be 1-255 letters, digits or underscores")
        return v


class PendingNotification(ValueObject):
    """A notification computed by a domain service but not yet recorded.

    Services return these alongside their primary result so the caller
    decides when (and whether) to deliver them.
    """

    recipient_id: UserId
    title: str
    content: str
