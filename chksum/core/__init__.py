"""
Core infrastructure for chksum.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ChecksumAlgorithmError,
    ChecksumIOError,
    ChksumConfigError,
    ChksumException,
    ChksumValidationError,
    ConfigFileError,
    ConfigValidationError,
    InvalidArgumentError,
    UnsupportedAlgorithmError,
)

__all__ = [
    "ChecksumAlgorithmError",
    "ChecksumIOError",
    "ChksumConfigError",
    "ChksumException",
    "ChksumValidationError",
    "ConfigFileError",
    "ConfigValidationError",
    "InvalidArgumentError",
    "ServiceContainer",
    "UnsupportedAlgorithmError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
