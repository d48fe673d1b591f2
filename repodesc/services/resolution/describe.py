"""
Parsing helpers for describe-style output.

Describe output looks like ``1.2.3-4-gabc1234`` (tag, commits since tag,
abbreviated hash), optionally followed by the dirty marker, or is just the
bare abbreviated hash when no tag is reachable.
"""

from __future__ import annotations

import re

SHORT_HASH_LENGTH = 7

# The trailing hash: the whole output, or what follows the final "-g".
# git lengthens it past the requested abbreviation when 7 digits are ambiguous.
_HASH_RE = re.compile(r"(?:^|-g)([0-9a-f]{7,})$")
_SEMVER_PREFIX_RE = re.compile(r"^\d+\.\d+\.\d+")


def strip_dirty_marker(describe: str, dirty_marker: str) -> str:
    """Remove a trailing dirty marker, if present."""
    if dirty_marker and describe.endswith(dirty_marker):
        return describe[: -len(dirty_marker)]
    return describe


def extract_short_hash(describe: str, dirty_marker: str) -> str | None:
    """
    Extract the abbreviated commit hash from describe output.

    The dirty marker is removed first so its characters cannot be
    captured as part of the hash.

    Returns:
        The first seven digits of the trailing hash, or None
    """
    match = _HASH_RE.search(strip_dirty_marker(describe, dirty_marker))
    return match.group(1)[:SHORT_HASH_LENGTH] if match else None


def has_semver_prefix(describe: str) -> bool:
    """Check whether describe output starts with MAJOR.MINOR.PATCH."""
    return _SEMVER_PREFIX_RE.match(describe) is not None


def semver_from_describe(describe: str) -> str:
    """Return the describe output up to its first '-'."""
    return describe.split("-", 1)[0]


def synthesize_describe(tag: str, count: str, short_hash: str, dirty_suffix: str = "") -> str:
    """Build a describe-style string for a repository without tags."""
    return f"{tag}-{count}-g{short_hash}{dirty_suffix}"
