"""
Native Click implementation of the digest command.

Usage: chksum digest [-n LENGTH] TEXT
"""

from __future__ import annotations

import click

from ...services.checksum import digest as short_digest
from ..context import ChksumContext
from ..decorators import handle_errors


@click.command("digest")
@click.argument("text")
@click.option(
    "-n",
    "--length",
    type=int,
    default=None,
    help="Number of hex characters. Defaults to checksum.digest_length from config.",
)
@click.pass_obj
@handle_errors
def digest(ctx: ChksumContext, text: str, length: int | None) -> None:
    """Print a short sha256 digest of TEXT."""
    n = length if length is not None else ctx.digest_length
    click.echo(short_digest(text, n))
