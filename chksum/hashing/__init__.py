"""
Hash algorithm accumulators, strategies and registry.

This module implements the Strategy pattern for hash algorithms,
enabling new algorithms to be added without modifying existing code.
"""

from .accumulators import DigestAccumulator, GitObjectAccumulator, HashAccumulator
from .registry import (
    DEFAULT_ALGORITHM,
    HashAlgorithmRegistry,
    default_accumulator,
    get_registry,
    new,
)
from .strategies import (
    GitObjectStrategy,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
    SHA512Strategy,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "DigestAccumulator",
    "GitObjectAccumulator",
    "GitObjectStrategy",
    "HashAccumulator",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "MD5Strategy",
    "SHA1Strategy",
    "SHA256Strategy",
    "SHA512Strategy",
    "default_accumulator",
    "get_registry",
    "new",
]
