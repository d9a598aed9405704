"""
Native Click implementation of the verify command.

Usage: chksum verify CHECKSUM [FILE] [-s TEXT]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...presenters.formatting import truncate_string
from ...services.checksum import parse_checksum, verify_file, verify_string
from ..context import ChksumContext
from ..decorators import handle_errors


@click.command("verify")
@click.argument("checksum")
@click.argument("file", required=False, type=click.Path(path_type=Path))
@click.option("-s", "--string", "text", default=None, help="Verify TEXT instead of a file.")
@click.pass_obj
@handle_errors
def verify(ctx: ChksumContext, checksum: str, file: Path | None, text: str | None) -> None:
    """Verify a file or string against a checksum.

    Exits 0 and prints OK on match, exits 1 and prints FAILED otherwise.

    \b
    Arguments:

        CHECKSUM  Reference checksum, "<algorithm>:<hex>" or bare hex (sha256)

        FILE      File to verify
    """
    if (file is None) == (text is None):
        raise click.UsageError("Provide exactly one of FILE or --string TEXT.")

    reference = parse_checksum(checksum)
    if not reference.is_valid():
        click.echo(
            f"Warning: {truncate_string(checksum, 72)} is not a well-formed {reference.algorithm} checksum",
            err=True,
        )

    if file is not None:
        ok = verify_file(file, reference)
    else:
        ok = verify_string(text or "", reference)

    if not ok:
        click.echo("FAILED")
        raise SystemExit(1)
    click.echo("OK")
