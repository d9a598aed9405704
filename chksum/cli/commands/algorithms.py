"""
Native Click implementation of the algorithms command.

Usage: chksum algorithms
"""

from __future__ import annotations

import click

from ...hashing import DEFAULT_ALGORITHM, get_registry


@click.command("algorithms")
def algorithms() -> None:
    """List supported hash algorithms."""
    registry = get_registry()
    for name in registry.available_algorithms:
        accumulator = registry.resolve(name)
        marker = " (default)" if name == DEFAULT_ALGORITHM else ""
        click.echo(f"  {name:10} {accumulator.digest_size * 8:4d} bits{marker}")
    click.echo(f"  {'git-<type>':10} {160:4d} bits  (git object id for <type>)")
