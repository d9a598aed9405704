"""
Click command implementations for chksum CLI.

Each module corresponds to a chksum command (e.g., verify.py implements
'chksum verify'). Commands are registered with the main CLI group via the
register_commands() function in chksum.cli.
"""

from .algorithms import algorithms
from .config import config
from .digest import digest
from .parse import parse
from .sum import sum_cmd
from .verify import verify

COMMANDS = [
    algorithms,
    config,
    digest,
    parse,
    sum_cmd,
    verify,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "config",
    "digest",
    "parse",
    "sum_cmd",
    "verify",
]
