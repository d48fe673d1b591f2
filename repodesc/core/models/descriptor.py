"""
Repository descriptor model.

The single record produced per resolution: where the repository is, which
branch and commit it is on, whether the tree is dirty, its remote, and the
version information derived from branch name and tags.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from .base import ImmutableModel

NonEmpty = Annotated[str, Field(min_length=1)]

DESCRIPTOR_FIELDS: tuple[str, ...] = (
    "location",
    "branch",
    "commit",
    "is_dirty",
    "remote",
    "semver",
    "stage",
    "version",
)

Stage = Literal["feature", "develop", "master", "release"]


class RepositoryDescriptor(ImmutableModel):
    """Normalized, immutable summary of a working copy's state.

    All values are strings. ``is_dirty`` is ``"true"`` or ``"false"`` when the
    status query succeeded, otherwise the status fallback token.
    """

    location: NonEmpty
    branch: NonEmpty
    commit: NonEmpty
    is_dirty: NonEmpty
    remote: NonEmpty
    semver: NonEmpty
    stage: NonEmpty
    version: NonEmpty

    def to_dict(self) -> dict[str, str]:
        """Return the fields in their canonical order."""
        return {name: getattr(self, name) for name in DESCRIPTOR_FIELDS}
