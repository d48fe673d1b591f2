"""
Native Click implementation of the check command.

Usage: repodesc check PATH [--allow-dirty] [--allow-no-semver]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.models.config import DescriptorConfig
from ...core.models.descriptor import RepositoryDescriptor
from ..context import RepodescContext
from ..decorators import handle_errors, require_single_path


def release_blockers(
    descriptor: RepositoryDescriptor,
    config: DescriptorConfig,
    allow_dirty: bool = False,
    allow_no_semver: bool = False,
) -> list[str]:
    """List the reasons the repository state must not be released."""
    problems = []
    if descriptor.is_dirty == "true" and not allow_dirty:
        problems.append("working tree has uncommitted changes")
    if descriptor.semver == config.no_semver_fallback and not allow_no_semver:
        problems.append(f"no semantic version available (semver is {descriptor.semver!r})")
    return problems


@click.command("check")
@click.argument("paths", nargs=-1, metavar="PATH")
@click.option("--allow-dirty", is_flag=True, help="Do not fail on uncommitted changes.")
@click.option("--allow-no-semver", is_flag=True, help="Do not fail without a semantic version.")
@click.pass_obj
@handle_errors
@require_single_path
def check(ctx: RepodescContext, path: Path, allow_dirty: bool, allow_no_semver: bool) -> None:
    """Verify the repository at PATH is in a releasable state.

    Fails if the working tree is dirty or no semantic version can be
    derived from a release branch or tag.
    """
    resolver, loaded = ctx.create_resolver(path)
    descriptor = resolver.resolve(path)

    problems = release_blockers(
        descriptor,
        loaded.config.descriptor_config(),
        allow_dirty=allow_dirty,
        allow_no_semver=allow_no_semver,
    )
    if problems:
        lines = [f"{descriptor.location} is not releasable:"]
        lines.extend(f"  {problem}" for problem in problems)
        raise click.ClickException("\n".join(lines))

    click.echo(f"OK: {descriptor.semver} ({descriptor.version})")
