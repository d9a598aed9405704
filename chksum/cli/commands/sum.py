"""
Native Click implementation of the sum command.

Usage: chksum sum [-a ALGORITHM] [-s TEXT] [FILE...]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...hashing import new
from ...presenters.formatting import format_size
from ...services.checksum import compute_file, compute_string
from ..context import ChksumContext
from ..decorators import handle_errors


@click.command("sum")
@click.option(
    "-a",
    "--algorithm",
    default=None,
    help="Hash algorithm (sha512, sha256, sha1, md5, git, git-<type>). "
    "Defaults to checksum.algorithm from config.",
)
@click.option("-s", "--string", "text", default=None, help="Checksum TEXT instead of files.")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.pass_obj
@handle_errors
def sum_cmd(
    ctx: ChksumContext,
    algorithm: str | None,
    text: str | None,
    files: tuple[Path, ...],
) -> None:
    """Compute checksums of files or a string.

    Prints one "<algorithm>:<hex>" line per input.

    \b
    Examples:

        chksum sum data.csv                 # Default algorithm

        chksum sum -a git README.md         # Same id as `git hash-object`

        chksum sum -a md5 -s "hello"        # Checksum a literal string
    """
    if text is None and not files:
        raise click.UsageError("Provide FILE arguments or --string TEXT.")

    accumulator = new(algorithm if algorithm is not None else ctx.default_algorithm)

    if text is not None:
        click.echo(str(compute_string(text, accumulator)))

    for path in files:
        checksum = compute_file(path, accumulator)
        size = format_size(path.stat().st_size).strip()
        click.echo(f"{checksum}  {path}  ({size})")
