"""
Native Click implementation of the config command.

Usage: repodesc config [list|get|show]
"""

from __future__ import annotations

import click

from ...config import config_get, config_list
from ..context import RepodescContext
from ..decorators import handle_errors


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .repodesc/config.toml, or the [tool.repodesc]
    table of pyproject.toml, searched upwards from the repository path.
    Environment variables (REPODESC_<KEY>) override file values.

    \b
    Examples:

        repodesc config list                  # List all options

        repodesc config get no_semver_fallback

        repodesc config show path/to/repo
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    click.echo("Available config options:")
    click.echo("")

    for key, info in config_list().items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.option(
    "--path",
    "start_dir",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Directory to search for a config file from.",
)
@click.pass_obj
@handle_errors
def config_get_cmd(ctx: RepodescContext, key: str, start_dir: str) -> None:
    """Get an effective config value.

    Arguments:

        KEY    The config key to get (e.g. logging.level)
    """
    value = config_get(key, config_path=ctx.config_path, start_dir=start_dir)
    if value is None:
        raise click.ClickException(f"Unknown config key: {key}")
    click.echo(f"{key}: {value}")


@config.command("show")
@click.argument("start_dir", required=False, default=".", type=click.Path(exists=True))
@click.pass_obj
@handle_errors
def config_show_cmd(ctx: RepodescContext, start_dir: str) -> None:
    """Show the effective configuration and where it came from."""
    loaded = ctx.load_settings(start_dir)

    if loaded.config_file:
        click.echo(f"Config file: {loaded.config_file}")
    else:
        click.echo("Config file: (none, using defaults)")
    if loaded.config_error:
        click.echo(f"Config error: {loaded.config_error}")
    click.echo("")

    for key in config_list():
        click.echo(f"{key} = {loaded.config.get(key)!r}")
