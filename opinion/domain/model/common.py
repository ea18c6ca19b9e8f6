"""Shared base for Opinion domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic base for users, articles, comments and notifications.

    Changes are made by validating a new instance (see
    ``CommentService.update_comment``), never by assignment.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
