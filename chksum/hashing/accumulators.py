"""
Hash accumulator implementations.

An accumulator ingests bytes over one or more update() calls and produces a
digest of everything ingested since the last reset(). The interface mirrors
hashlib objects so standard and custom variants are interchangeable.
"""

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class HashAccumulator(ABC):
    """
    Abstract base class for resettable hash accumulators.

    Implementations must provide:
    - name: Canonical algorithm name (e.g., 'sha256', 'git', 'git-tree')
    - digest_size / block_size: Fixed sizes in bytes
    - update(): Append data
    - digest(): Digest of all data since the last reset, without mutating state
    - reset(): Return to the empty state
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return canonical algorithm name."""
        pass

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Return digest size in bytes."""
        pass

    @property
    @abstractmethod
    def block_size(self) -> int:
        """Return internal block size in bytes."""
        pass

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Add data to the accumulator."""
        pass

    @abstractmethod
    def digest(self) -> bytes:
        """Return the digest of all data ingested since the last reset."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Discard ingested data."""
        pass

    def hexdigest(self) -> str:
        """Return the digest as a lower-case hex string."""
        return self.digest().hex()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class DigestAccumulator(HashAccumulator):
    """Accumulator backed by a standard hashlib primitive."""

    def __init__(self, name: str, factory: Callable[[], Any]) -> None:
        """
        Initialize accumulator.

        Args:
            name: Canonical algorithm name
            factory: Zero-argument callable returning a fresh hashlib object
        """
        self._name = name
        self._factory = factory
        self._hasher = factory()

    @property
    def name(self) -> str:
        return self._name

    @property
    def digest_size(self) -> int:
        return self._hasher.digest_size

    @property
    def block_size(self) -> int:
        return self._hasher.block_size

    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    def digest(self) -> bytes:
        return self._hasher.digest()

    def reset(self) -> None:
        self._hasher = self._factory()


class GitObjectAccumulator(HashAccumulator):
    """
    Accumulator producing git object ids.

    Git hashes ``"<type> <length>\\0"`` followed by the object content with
    SHA-1. The header needs the total length, so input is buffered until
    digest() is called.
    """

    DIGEST_SIZE = 20
    BLOCK_SIZE = 64

    def __init__(self, object_type: str = "blob") -> None:
        """
        Initialize accumulator.

        Args:
            object_type: Git object type written in the header ('blob', 'tree', ...)
        """
        self.object_type = object_type
        self._data = bytearray()

    @property
    def name(self) -> str:
        if self.object_type == "blob":
            return "git"
        return f"git-{self.object_type}"

    @property
    def digest_size(self) -> int:
        return self.DIGEST_SIZE

    @property
    def block_size(self) -> int:
        return self.BLOCK_SIZE

    def header(self) -> bytes:
        """Return the object header for the currently buffered data."""
        return f"{self.object_type} {len(self._data)}\0".encode()

    def update(self, data: bytes) -> None:
        self._data.extend(data)

    def digest(self) -> bytes:
        hasher = hashlib.sha1(self.header())
        hasher.update(self._data)
        return hasher.digest()

    def reset(self) -> None:
        self._data = bytearray()
