"""
Shared pytest fixtures for chksum tests.

This module provides:
- reset_container: Clears the global DI container between tests
- chksum_cli: Helper to run chksum CLI commands via subprocess
- sample_file: A small file with known contents
"""

import os
import subprocess
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from chksum.core.bootstrap import reset


@pytest.fixture(autouse=True)
def reset_container() -> Iterator[None]:
    """Ensure each test starts without a bootstrapped container."""
    reset()
    yield
    reset()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop CHKSUM_* environment variables that would leak into settings."""
    for name in list(os.environ):
        if name.startswith("CHKSUM_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a file containing b'hi\\n'."""
    path = tmp_path / "hi.txt"
    path.write_bytes(b"hi\n")
    return path


@pytest.fixture
def chksum_cli(tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """
    Return a helper that runs `python -m chksum` inside tmp_path.

    Returns:
        Function that takes CLI args and returns CompletedProcess
    """

    def run_chksum(*args: str, check: bool = True) -> subprocess.CompletedProcess:
        result = subprocess.run(
            [sys.executable, "-m", "chksum", *args],
            cwd=tmp_path,
            capture_output=True,
            text=True,
        )
        if check and result.returncode != 0:
            raise subprocess.CalledProcessError(
                result.returncode,
                [sys.executable, "-m", "chksum", *args],
                result.stdout,
                result.stderr,
            )
        return result

    return run_chksum
