"""
Service layer for chksum.
"""

from .checksum import (
    compute_bytes,
    compute_file,
    compute_string,
    digest,
    parse_checksum,
    verify_bytes,
    verify_file,
    verify_string,
)
from .logging import ChksumLogger, NullLogger

__all__ = [
    "ChksumLogger",
    "NullLogger",
    "compute_bytes",
    "compute_file",
    "compute_string",
    "digest",
    "parse_checksum",
    "verify_bytes",
    "verify_file",
    "verify_string",
]
