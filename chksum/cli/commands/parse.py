"""
Native Click implementation of the parse command.

Usage: chksum parse CHECKSUM
"""

from __future__ import annotations

import click

from ...services.checksum import parse_checksum
from ..context import ChksumContext
from ..decorators import handle_errors


@click.command("parse")
@click.argument("checksum")
@click.pass_obj
@handle_errors
def parse(ctx: ChksumContext, checksum: str) -> None:
    """Show the algorithm and value of a checksum string.

    Exits 1 if the algorithm prefix is unknown. A malformed value is
    reported as invalid but is not an error.
    """
    reference = parse_checksum(checksum)
    click.echo(f"Algorithm: {reference.algorithm}")
    click.echo(f"Value:     {reference.value}")
    click.echo(f"Valid:     {'yes' if reference.is_valid() else 'no'}")
