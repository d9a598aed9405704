"""
Output formatting for the chksum CLI.
"""

from .formatting import format_size, truncate_string

__all__ = ["format_size", "truncate_string"]
