"""
Checksum computation and verification.

Every operation works on its own accumulator: either the one the caller
passes in (which is always left reset on return) or a fresh one from the
registry. No hashing state is shared between calls.
"""

from __future__ import annotations

from pathlib import Path

from ..core.di import get_logger
from ..core.exceptions import InvalidArgumentError
from ..core.models.checksum import Checksum
from ..hashing.accumulators import HashAccumulator
from ..hashing.registry import default_accumulator
from ..utils.files import read_file


def compute_bytes(data: bytes, accumulator: HashAccumulator | None = None) -> Checksum:
    """
    Compute the checksum of data.

    Args:
        data: Bytes to hash
        accumulator: Accumulator to use (a fresh default one if None).
            It is reset before returning and can be reused immediately.

    Returns:
        Checksum with a lower-case hex value
    """
    if accumulator is None:
        accumulator = default_accumulator()
    try:
        accumulator.update(data)
        value = accumulator.hexdigest()
    finally:
        accumulator.reset()
    get_logger().debug("Computed %s checksum of %d bytes", accumulator.name, len(data))
    return Checksum(value=value, algorithm=accumulator.name)


def compute_string(text: str, accumulator: HashAccumulator | None = None) -> Checksum:
    """Compute the checksum of a string's UTF-8 encoding."""
    return compute_bytes(text.encode("utf-8"), accumulator)


def compute_file(path: str | Path, accumulator: HashAccumulator | None = None) -> Checksum:
    """
    Compute the checksum of a file's contents.

    Raises:
        ChecksumIOError: If the file cannot be read
    """
    data = read_file(path)
    return compute_bytes(data, accumulator)


def parse_checksum(text: str) -> Checksum:
    """
    Parse ``"<algorithm>:<value>"`` text into a Checksum.

    Raises:
        UnsupportedAlgorithmError: If the prefix names an unknown algorithm
    """
    checksum = Checksum.parse(text)
    get_logger().debug("Parsed checksum %s", checksum)
    return checksum


def verify_bytes(data: bytes, checksum: Checksum) -> bool:
    """
    Check data against a reference checksum.

    The data is hashed with a fresh accumulator for the checksum's
    algorithm and the hex strings are compared exactly.

    Returns:
        True iff the computed value equals checksum.value

    Raises:
        InvalidArgumentError: If the checksum has no algorithm
        UnsupportedAlgorithmError: If the checksum's algorithm is unknown
    """
    actual = compute_bytes(data, checksum.new_accumulator())
    if actual.value != checksum.value:
        get_logger().info("Checksum mismatch: expected %s, got %s", checksum, actual)
        return False
    return True


def verify_string(text: str, checksum: Checksum) -> bool:
    """Check a string's UTF-8 encoding against a reference checksum."""
    return verify_bytes(text.encode("utf-8"), checksum)


def verify_file(path: str | Path, checksum: Checksum) -> bool:
    """
    Check a file against a reference checksum.

    A mismatch returns False; a read failure raises.

    Raises:
        ChecksumIOError: If the file cannot be read
    """
    return verify_bytes(read_file(path), checksum)


def digest(text: str, n: int) -> str:
    """
    Return the first n hex characters of text's default checksum.

    Raises:
        InvalidArgumentError: If n is negative or longer than the digest
    """
    value = compute_string(text).value
    if n < 0 or n > len(value):
        raise InvalidArgumentError(
            f"Digest length must be between 0 and {len(value)}",
            argument="n",
            value=str(n),
        )
    return value[:n]
