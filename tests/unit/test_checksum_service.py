"""
Unit tests for checksum computation and verification.

Tests compute/verify over bytes, strings and files, accumulator reuse,
error propagation and short digests.
"""

import hashlib

import pytest

from chksum.core.exceptions import ChecksumIOError, InvalidArgumentError, UnsupportedAlgorithmError
from chksum.core.models.checksum import Checksum
from chksum.hashing import new
from chksum.services.checksum import (
    compute_bytes,
    compute_file,
    compute_string,
    digest,
    parse_checksum,
    verify_bytes,
    verify_file,
    verify_string,
)

ALGORITHMS = ["sha512", "sha256", "sha1", "md5", "git", "git-tree", "git-commit"]
SHA256_HELLO = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


class TestCompute:
    """Tests for compute_bytes / compute_string / compute_file."""

    def test_default_algorithm(self):
        c = compute_bytes(b"hello")
        assert c == Checksum(value=SHA256_HELLO, algorithm="sha256")

    def test_explicit_accumulator(self):
        c = compute_bytes(b"hello", new("md5"))
        assert c.algorithm == "md5"
        assert c.value == "5d41402abc4b2a76b9719d911017c592"

    def test_git_empty(self):
        c = compute_bytes(b"", new("git"))
        assert c.value == hashlib.sha1(b"blob 0\x00").hexdigest()

    def test_git_hi(self):
        c = compute_string("hi\n", new("git"))
        assert c.value == hashlib.sha1(b"blob 3\x00hi\n").hexdigest()
        assert str(c) == "git:45b983be36b73c0788dc9cbcb76cbb80fc7bb057"

    def test_git_prefix_types_differ(self):
        values = {compute_bytes(b"payload", new(name)).value for name in ("git", "git-tree", "git-commit")}
        assert len(values) == 3

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_result_is_valid(self, name):
        assert compute_bytes(b"some data", new(name)).is_valid()

    def test_string_is_utf8(self):
        assert compute_string("héllo") == compute_bytes("héllo".encode())

    def test_accumulator_left_reset(self):
        """The passed accumulator is reset and carries nothing into the next call."""
        acc = new("sha1")
        compute_bytes(b"first", acc)
        assert acc.hexdigest() == hashlib.sha1(b"").hexdigest()
        second = compute_bytes(b"second", acc)
        assert second.value == hashlib.sha1(b"second").hexdigest()

    def test_git_accumulator_reuse(self):
        acc = new("git")
        compute_bytes(b"first", acc)
        assert compute_bytes(b"hi\n", acc).value == "45b983be36b73c0788dc9cbcb76cbb80fc7bb057"

    def test_compute_file(self, sample_file):
        c = compute_file(sample_file, new("git"))
        assert c.value == "45b983be36b73c0788dc9cbcb76cbb80fc7bb057"

    def test_compute_file_accepts_str(self, sample_file):
        assert compute_file(str(sample_file)) == compute_bytes(b"hi\n")

    def test_compute_missing_file(self, tmp_path):
        with pytest.raises(ChecksumIOError) as exc_info:
            compute_file(tmp_path / "missing.bin")
        assert exc_info.value.path == str(tmp_path / "missing.bin")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_compute_directory(self, tmp_path):
        with pytest.raises(ChecksumIOError):
            compute_file(tmp_path)


class TestVerify:
    """Tests for verify_bytes / verify_string / verify_file."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_verify_own_checksum(self, name):
        data = b"\x00\x01binary\xff"
        assert verify_bytes(data, compute_bytes(data, new(name))) is True

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_rejects_tampering(self, name):
        checksum = compute_bytes(b"original", new(name))
        assert verify_bytes(b"tampered", checksum) is False

    def test_verify_string(self):
        assert verify_string("hello", Checksum(value=SHA256_HELLO, algorithm="sha256"))

    def test_verify_parsed(self):
        assert verify_string("hello", parse_checksum(SHA256_HELLO))
        assert verify_string("hi\n", parse_checksum("git:45b983be36b73c0788dc9cbcb76cbb80fc7bb057"))

    def test_comparison_is_case_sensitive(self):
        assert verify_string("hello", Checksum(value=SHA256_HELLO.upper(), algorithm="sha256")) is False

    def test_no_algorithm_raises(self):
        with pytest.raises(InvalidArgumentError):
            verify_bytes(b"x", Checksum(value=SHA256_HELLO))

    def test_unknown_algorithm_raises(self):
        with pytest.raises(UnsupportedAlgorithmError):
            verify_bytes(b"x", Checksum(value="00", algorithm="crc32"))

    def test_verify_file_match(self, sample_file):
        checksum = compute_bytes(b"hi\n", new("sha512"))
        assert verify_file(sample_file, checksum) is True

    def test_verify_file_mismatch(self, sample_file):
        checksum = compute_bytes(b"bye\n", new("sha512"))
        assert verify_file(sample_file, checksum) is False

    def test_verify_missing_file_raises(self, tmp_path):
        with pytest.raises(ChecksumIOError):
            verify_file(tmp_path / "missing", compute_bytes(b""))


class TestDigest:
    """Tests for digest()."""

    def test_prefix(self):
        assert digest("hello", 8) == SHA256_HELLO[:8]

    def test_full_length(self):
        assert digest("hello", 64) == SHA256_HELLO

    def test_zero(self):
        assert digest("hello", 0) == ""

    @pytest.mark.parametrize("n", [65, 999, -1])
    def test_out_of_range(self, n):
        with pytest.raises(InvalidArgumentError) as exc_info:
            digest("hello", n)
        assert exc_info.value.context["value"] == str(n)
