"""File reading helpers."""

from __future__ import annotations

from pathlib import Path

from ..core.exceptions import ChecksumIOError


def read_file(path: str | Path) -> bytes:
    """Read a whole file into memory.

    Args:
        path: File path

    Returns:
        File contents

    Raises:
        ChecksumIOError: If the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ChecksumIOError(
            f"Failed to read file: {e.strerror or e}", path=str(path), cause=e
        ) from e
