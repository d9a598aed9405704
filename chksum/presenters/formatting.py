"""
Shared formatting utilities for chksum CLI output.
"""

from __future__ import annotations

from ..core.exceptions import InvalidArgumentError

SIZE_UNIT = 1024
SIZE_PREFIXES = "kMGTPE"


def format_size(size_bytes: int | None) -> str:
    """Format byte size as human-readable string.

    Sizes below 1 KiB are shown as a plain byte count; larger sizes use
    base-1024 prefixes in a fixed-width field.

    Args:
        size_bytes: Size in bytes, or None

    Returns:
        Human-readable size string with appropriate unit

    Raises:
        InvalidArgumentError: If size_bytes is negative

    Examples:
        >>> format_size(None)
        '?'
        >>> format_size(500)
        '500 B'
        >>> format_size(1536)
        '   1.50 kB'
        >>> format_size(3 * 1024**3)
        '   3.00 GB'
    """
    if size_bytes is None:
        return "?"
    if size_bytes < 0:
        raise InvalidArgumentError(
            "Size must not be negative", argument="size_bytes", value=str(size_bytes)
        )

    if size_bytes < SIZE_UNIT:
        return f"{size_bytes} B"

    exp = 0
    value = float(size_bytes)
    while value >= SIZE_UNIT and exp < len(SIZE_PREFIXES):
        value /= SIZE_UNIT
        exp += 1
    return f"{value:7.2f} {SIZE_PREFIXES[exp - 1]}B"


def truncate_string(s: str, max_len: int = 50, suffix: str = "...") -> str:
    """Truncate a string with ellipsis if too long.

    Examples:
        >>> truncate_string("short", 10)
        'short'
        >>> truncate_string("this is a very long string", 15)
        'this is a ve...'
    """
    if len(s) <= max_len:
        return s
    return s[: max_len - len(suffix)] + suffix
