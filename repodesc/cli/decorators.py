"""
Click decorators for repodesc CLI commands.

- handle_errors: Turns RepodescException into a ClickException carrying its exit_code
- require_single_path: Enforces exactly one existing directory argument
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import RepodescException, UsageError
from ..services.resolution import validate_repository_path

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator reporting repodesc errors on stderr with their exit_code.

    Usage:
        @click.command()
        @handle_errors
        def describe(...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except UsageError as e:
            ctx = click.get_current_context()
            error = click.ClickException(f"{e.message}\n\n{ctx.get_usage()}")
            error.exit_code = e.exit_code
            raise error from e
        except RepodescException as e:
            error = click.ClickException(str(e))
            error.exit_code = e.exit_code
            raise error from e

    return wrapper  # type: ignore[return-value]


def require_single_path(f: F) -> F:
    """Decorator validating the variadic ``paths`` argument.

    Replaces ``paths`` with ``path``: the single argument, made absolute.
    Apply below @handle_errors so violations exit with status 1.

    Usage:
        @click.command()
        @click.argument("paths", nargs=-1, metavar="PATH")
        @handle_errors
        @require_single_path
        def describe(path: Path):
            ...

    Raises:
        UsageError: If not exactly one path was given
        RepositoryPathError: If the path is missing or not a directory
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        paths: tuple[str, ...] = kwargs.pop("paths", ())
        if len(paths) != 1:
            raise UsageError(expected=1, received=len(paths))
        kwargs["path"] = validate_repository_path(paths[0])
        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
