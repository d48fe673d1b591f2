"""
Native Click implementation of the describe command.

Usage: repodesc describe PATH [--format json|env|text] [--field NAME]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.models.descriptor import DESCRIPTOR_FIELDS
from ...presenters.descriptor import FORMATS, render_descriptor
from ..context import RepodescContext
from ..decorators import handle_errors, require_single_path


@click.command("describe")
@click.argument("paths", nargs=-1, metavar="PATH")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(sorted(FORMATS)),
    default="json",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--field",
    type=click.Choice(DESCRIPTOR_FIELDS),
    default=None,
    help="Print only this field's raw value.",
)
@click.pass_obj
@handle_errors
@require_single_path
def describe(ctx: RepodescContext, path: Path, fmt: str, field: str | None) -> None:
    """Print the descriptor of the repository at PATH.

    Individual fields that cannot be determined are reported as their
    configured fallback token; the command still succeeds.

    \b
    Examples:

        repodesc describe .                     # JSON record

        eval "$(repodesc describe . --format env)"

        repodesc describe . --field semver
    """
    resolver, _loaded = ctx.create_resolver(path)
    descriptor = resolver.resolve(path)

    if field:
        click.echo(descriptor.to_dict()[field])
    else:
        click.echo(render_descriptor(descriptor, fmt))
