"""Mention extraction for comment text."""

import re

MENTION_PATTERN = re.compile(r"@(\w+)")


def extract_mentions(text: str) -> list[str]:
    """Return the handles mentioned in ``text``.

    Every ``@`` followed by word characters yields its handle, in order of
    appearance. Repeated mentions are kept, so each occurrence is looked up
    and notified separately.

    Example:
        >>> extract_mentions("thanks @alice and @bob, @alice!")
        ['alice', 'bob', 'alice']
    """
    return MENTION_PATTERN.findall(text)
