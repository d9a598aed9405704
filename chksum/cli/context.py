"""
Click context extension for chksum CLI.

Provides ChksumContext dataclass that holds chksum-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.settings import ChksumSettings, load_settings


@dataclass
class ChksumContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Loaded settings
    """

    cwd: Path
    settings: ChksumSettings

    @classmethod
    def create(cls, cwd: Path | None = None) -> ChksumContext:
        """Create a ChksumContext for the current environment.

        Loads settings and bootstraps the service container so library
        code picks up the configured logger.

        Args:
            cwd: Working directory override (defaults to Path.cwd())

        Returns:
            Configured ChksumContext instance
        """
        from ..core.bootstrap import bootstrap

        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        bootstrap(settings)

        return cls(cwd=cwd, settings=settings)

    @property
    def default_algorithm(self) -> str:
        """Algorithm used when a command is not given --algorithm."""
        return self.settings.checksum.algorithm

    @property
    def digest_length(self) -> int:
        """Default digest length for `chksum digest`."""
        return self.settings.checksum.digest_length
