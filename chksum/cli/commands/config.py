"""
Native Click implementation of the config command.

Usage: chksum config [list|get] [key]
"""

import click

from ..context import ChksumContext


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View effective configuration.

    Config is read from .chksum/config.toml, pyproject.toml [tool.chksum]
    and CHKSUM_<SECTION>__<KEY> environment variables.

    \b
    Examples:

        chksum config list                 # Show all values

        chksum config get checksum.algorithm
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
@click.pass_obj
def config_list_cmd(ctx: ChksumContext) -> None:
    """List all config values."""
    settings = ctx.settings
    if settings.config_file:
        click.echo(f"Config file: {settings.config_file}")
    else:
        click.echo("Config file: (none)")
    if settings.config_error:
        click.echo(f"Config error: {settings.config_error}", err=True)
    click.echo("")

    for section, values in settings.to_dict().items():
        if section.startswith("_"):
            continue
        for key, value in values.items():
            click.echo(f"  {section}.{key} = {value}")


@config.command("get")
@click.argument("key")
@click.pass_obj
def config_get_cmd(ctx: ChksumContext, key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. checksum.algorithm)
    """
    value = ctx.settings.get(key)
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
