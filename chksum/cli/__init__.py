"""
Click-based CLI for chksum.

This module provides the main Click command group and serves as the
entry point for the chksum CLI.

Usage:
    from chksum.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .. import __version__
from ..core.exceptions import ChksumException
from .context import ChksumContext


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="chksum")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """chksum - compute and verify checksums

    \b
    Checksums:
        chksum sum FILE...           Compute checksums
        chksum verify SUM FILE       Verify a file against a checksum
        chksum digest TEXT           Short sha256 digest of a string
        chksum parse SUM             Inspect a checksum string

    \b
    Information:
        chksum algorithms            List supported algorithms
        chksum config                View configuration
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        try:
            ctx.obj = ChksumContext.create()
        except ChksumException as e:
            err = click.ClickException(str(e))
            err.exit_code = e.exit_code
            raise err from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "ChksumContext",
    "cli",
    "register_commands",
]
