"""Comment nesting policy.

Threads are two levels deep: a root comment and its replies. Any number of
replies may accumulate under a root, but a reply cannot be replied to.
"""

from opinion.domain.error import ExceedsNestingLevelError
from opinion.domain.model.comment import MAX_COMMENT_DEPTH, Comment


def can_reply_to(comment: Comment) -> bool:
    """Return True if a reply may be attached to ``comment``."""
    return comment.depth + 1 <= MAX_COMMENT_DEPTH


def check_nesting_level(comment: Comment) -> None:
    """Raise ExceedsNestingLevelError if ``comment`` cannot take replies."""
    if not can_reply_to(comment):
        raise ExceedsNestingLevelError(str(comment.id))
