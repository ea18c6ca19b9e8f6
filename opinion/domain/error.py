"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NoAccessError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class ExceedsNestingLevelError(DomainError):
    """Raised when replying to a comment that is itself a reply."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Cannot reply to comment {comment_id}: it is already a reply")
