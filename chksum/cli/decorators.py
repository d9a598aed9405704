"""
Click decorators for chksum CLI commands.

- handle_errors: Turns library exceptions into Click errors with the
  exception's suggested exit code
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.di import get_logger
from ..core.exceptions import ChksumException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator to report ChksumException as a Click error.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        def verify(ctx: ChksumContext, ...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except ChksumException as e:
            get_logger().error("%s failed: %s", f.__name__, e)
            err = click.ClickException(str(e))
            err.exit_code = e.exit_code
            raise err from e

    return wrapper  # type: ignore[return-value]
