"""
Pydantic models for chksum.
"""

from .base import ChksumBaseModel, ImmutableModel
from .checksum import Checksum
from .config import ChecksumConfig, ChksumConfig, LoggingConfig

__all__ = [
    "Checksum",
    "ChecksumConfig",
    "ChksumBaseModel",
    "ChksumConfig",
    "ImmutableModel",
    "LoggingConfig",
]
