"""
Checksum value model.

A Checksum pairs a hex digest with the name of the algorithm that produced
it. The algorithm is kept as a canonical name rather than a hasher object so
checksums can be compared, hashed and serialized freely.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pydantic import field_validator

from ..exceptions import InvalidArgumentError, UnsupportedAlgorithmError
from .base import ImmutableModel

if TYPE_CHECKING:
    from ...hashing.accumulators import HashAccumulator
    from ...hashing.registry import HashAlgorithmRegistry

SEPARATOR = ":"

_HEX_RE = re.compile(r"[a-fA-F0-9]+")


def _registry(registry: HashAlgorithmRegistry | None) -> HashAlgorithmRegistry:
    if registry is not None:
        return registry
    from ...hashing.registry import get_registry

    return get_registry()


class Checksum(ImmutableModel):
    """A computed or parsed checksum and the algorithm it belongs to.

    Construction never validates the digest; use is_valid() for that.

    Attributes:
        value: Hex digest string
        algorithm: Canonical algorithm name, or None if unknown
    """

    value: str
    algorithm: str | None = None

    @field_validator("algorithm", mode="before")
    @classmethod
    def _empty_means_default(cls, v: str | None) -> str | None:
        if v == "":
            from ...hashing.registry import DEFAULT_ALGORITHM

            return DEFAULT_ALGORITHM
        return v

    @classmethod
    def parse(cls, text: str, registry: HashAlgorithmRegistry | None = None) -> Checksum:
        """Parse a checksum in ``"<algorithm>:<value>"`` form.

        Only the first separator is significant, so the value may itself
        contain colons. Without a separator the whole text is the value and
        the default algorithm is assumed. The value is not checked for
        hex format here.

        Args:
            text: Checksum text
            registry: Registry used to resolve the algorithm prefix

        Returns:
            Parsed Checksum

        Raises:
            UnsupportedAlgorithmError: If the prefix names an unknown algorithm
        """
        from ...hashing.registry import DEFAULT_ALGORITHM

        algorithm, sep, value = text.partition(SEPARATOR)
        if not sep:
            return cls(value=text, algorithm=DEFAULT_ALGORITHM)

        name = _registry(registry).canonical_name(algorithm)
        return cls(value=value, algorithm=name)

    def format(self) -> str:
        """Serialize to ``"<algorithm>:<value>"``.

        A checksum without an algorithm serializes as the bare value. Note
        that parse() reads a bare value back under the default algorithm.
        """
        if self.algorithm is None:
            return self.value
        return f"{self.algorithm}{SEPARATOR}{self.value}"

    def __str__(self) -> str:
        return self.format()

    def new_accumulator(self, registry: HashAlgorithmRegistry | None = None) -> HashAccumulator:
        """Create a fresh accumulator for this checksum's algorithm.

        Raises:
            InvalidArgumentError: If the checksum has no algorithm
            UnsupportedAlgorithmError: If the algorithm is unknown
        """
        if self.algorithm is None:
            raise InvalidArgumentError(
                "Checksum has no algorithm", argument="checksum", value=self.value
            )
        return _registry(registry).resolve(self.algorithm)

    def is_valid(self, registry: HashAlgorithmRegistry | None = None) -> bool:
        """Check the checksum's own formatting.

        True iff an algorithm is set and known, the value has exactly twice
        the algorithm's digest size in characters, and every character is a
        hex digit. This says nothing about whether any data matches.
        """
        if self.algorithm is None:
            return False
        try:
            accumulator = self.new_accumulator(registry)
        except UnsupportedAlgorithmError:
            return False
        if len(self.value) != accumulator.digest_size * 2:
            return False
        return _HEX_RE.fullmatch(self.value) is not None

    def matches(self, other: Checksum, registry: HashAlgorithmRegistry | None = None) -> bool:
        """Compare digest values (case-insensitively) under the same algorithm.

        Algorithm names are compared in canonical form, so "git-blob" and
        "git" match. A missing or unknown algorithm never matches.
        """
        if self.algorithm is None or other.algorithm is None:
            return False
        if self.value.lower() != other.value.lower():
            return False
        resolver = _registry(registry)
        try:
            return resolver.canonical_name(self.algorithm) == resolver.canonical_name(other.algorithm)
        except UnsupportedAlgorithmError:
            return False
