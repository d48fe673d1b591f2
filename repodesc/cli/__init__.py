"""
Click-based CLI for repodesc.

Usage:
    from repodesc.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .. import __version__
from ..core.models.config import LogLevel
from .context import RepodescContext

LOG_LEVELS: tuple[LogLevel, ...] = ("debug", "info", "warning", "error")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="repodesc")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Configuration file to use instead of searching for one.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """repodesc - describe a repository for build and release pipelines

    Reports branch, commit, dirty state, origin remote, semantic version,
    release stage and a composite version string for a git working copy.

    \b
    Commands:
        repodesc describe PATH   Print the repository descriptor
        repodesc check PATH      Fail unless the repository is releasable
        repodesc config          View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    ctx.obj = RepodescContext(
        config_path=config_path,
        log_level=log_level.lower() if log_level else None,
    )


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "RepodescContext",
    "__version__",
    "cli",
    "register_commands",
]
