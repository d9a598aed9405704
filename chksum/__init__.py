"""
chksum - checksums with pluggable hash algorithms.

Compute, parse, format and verify checksums of bytes, strings and files
under sha512, sha256, sha1, md5 or git object hashing ("git", "git-<type>").

Usage:
    import chksum

    sum_ = chksum.compute_string("hello", chksum.new("git"))
    str(sum_)                       # 'git:...'
    chksum.verify_string("hello", chksum.Checksum.parse(str(sum_)))
"""

from .core.exceptions import (
    ChecksumIOError,
    ChksumException,
    InvalidArgumentError,
    UnsupportedAlgorithmError,
)
from .core.models.checksum import Checksum
from .hashing import (
    DEFAULT_ALGORITHM,
    HashAccumulator,
    HashAlgorithmRegistry,
    default_accumulator,
    new,
)
from .presenters.formatting import format_size
from .services.checksum import (
    compute_bytes,
    compute_file,
    compute_string,
    digest,
    parse_checksum,
    verify_bytes,
    verify_file,
    verify_string,
)

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_ALGORITHM",
    "Checksum",
    "ChecksumIOError",
    "ChksumException",
    "HashAccumulator",
    "HashAlgorithmRegistry",
    "InvalidArgumentError",
    "UnsupportedAlgorithmError",
    "__version__",
    "compute_bytes",
    "compute_file",
    "compute_string",
    "default_accumulator",
    "digest",
    "format_size",
    "new",
    "parse_checksum",
    "verify_bytes",
    "verify_file",
    "verify_string",
]
