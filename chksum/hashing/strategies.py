"""
Hash algorithm strategy implementations.

Each strategy is a stateless description of one algorithm family. It knows
the canonical name it answers to and builds a fresh accumulator on every
call, so strategies can be shared freely while accumulators never are.
"""

import hashlib
from abc import ABC, abstractmethod

from .accumulators import DigestAccumulator, GitObjectAccumulator, HashAccumulator


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - create_accumulator(): Factory method for accumulator instances
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'sha256', 'git')."""
        pass

    @abstractmethod
    def create_accumulator(self) -> HashAccumulator:
        """Create a new accumulator instance."""
        pass

    def hexdigest(self, data: bytes) -> str:
        """Hash data in one shot. Default implementation works for every accumulator."""
        accumulator = self.create_accumulator()
        accumulator.update(data)
        return accumulator.hexdigest()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm_name(self) -> str:
        return "sha512"

    def create_accumulator(self) -> HashAccumulator:
        return DigestAccumulator(self.algorithm_name, hashlib.sha512)


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - the library default."""

    @property
    def algorithm_name(self) -> str:
        return "sha256"

    def create_accumulator(self) -> HashAccumulator:
        return DigestAccumulator(self.algorithm_name, hashlib.sha256)


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy."""

    @property
    def algorithm_name(self) -> str:
        return "sha1"

    def create_accumulator(self) -> HashAccumulator:
        return DigestAccumulator(self.algorithm_name, hashlib.sha1)


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm_name(self) -> str:
        return "md5"

    def create_accumulator(self) -> HashAccumulator:
        return DigestAccumulator(self.algorithm_name, hashlib.md5)


class GitObjectStrategy(HashStrategy):
    """Git object id strategy, parameterized by object type."""

    PREFIX = "git-"

    def __init__(self, object_type: str = "blob") -> None:
        self.object_type = object_type

    @property
    def algorithm_name(self) -> str:
        if self.object_type == "blob":
            return "git"
        return f"{self.PREFIX}{self.object_type}"

    def create_accumulator(self) -> HashAccumulator:
        return GitObjectAccumulator(self.object_type)
