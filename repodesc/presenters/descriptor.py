"""
Descriptor output formats.

All formats emit fields in the same fixed order so repeated runs on an
unchanged repository produce byte-identical output.
"""

from __future__ import annotations

import json
import shlex

from ..core.models.descriptor import RepositoryDescriptor

ENV_PREFIX = "REPODESC_"


def _render_json(descriptor: RepositoryDescriptor) -> str:
    return json.dumps(descriptor.to_dict(), indent=2, sort_keys=True)


def _render_env(descriptor: RepositoryDescriptor) -> str:
    """Render as shell assignments, safe to eval or source."""
    return "\n".join(
        f"{ENV_PREFIX}{key.upper()}={shlex.quote(value)}"
        for key, value in descriptor.to_dict().items()
    )


def _render_text(descriptor: RepositoryDescriptor) -> str:
    fields = descriptor.to_dict()
    width = max(len(key) for key in fields)
    return "\n".join(f"{key + ':':<{width + 1}} {value}" for key, value in fields.items())


FORMATS = {
    "json": _render_json,
    "env": _render_env,
    "text": _render_text,
}


def render_descriptor(descriptor: RepositoryDescriptor, fmt: str = "json") -> str:
    """
    Render a descriptor for output.

    Args:
        descriptor: Descriptor to render
        fmt: One of 'json', 'env', 'text'

    Raises:
        ValueError: If fmt is unknown
    """
    try:
        renderer = FORMATS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt}") from None
    return renderer(descriptor)
