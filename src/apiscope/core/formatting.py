"""Summary formatting utilities for consistent terminal output.

Design principles:
- Every summary fits on one line
- Grammatically correct (1 class vs 2 classes)
"""

from __future__ import annotations

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "release")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 release" or "3 releases"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def describe_age(seconds: float) -> str:
    """Describe how long ago release data was collected.

    Examples:
        0.4 -> "Just Now"
        42 -> "42 seconds ago"
        7200 -> "2 hours ago"
    """
    if seconds < 1:
        return "Just Now"
    if seconds <= _MINUTE:
        return f"{round(seconds)} seconds ago"
    if seconds <= _HOUR:
        return f"{round(seconds / _MINUTE)} minutes ago"
    if seconds <= _DAY:
        return f"{round(seconds / _HOUR)} hours ago"
    return f"{round(seconds / _DAY)} days ago"


def truncate_at_word(text: str, max_len: int = 60, suffix: str = "...") -> str:
    """Truncate text at word boundary.

    Examples:
        "Closes the page and all of its frames", 20 -> "Closes the page..."
    """
    if len(text) <= max_len:
        return text
    cut = text[: max_len - len(suffix)]
    space = cut.rfind(" ")
    if space > 0:
        cut = cut[:space]
    return cut.rstrip() + suffix
