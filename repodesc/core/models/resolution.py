"""
Per-field resolution results.

Every derived descriptor field is either a value read from the repository
(``Resolved``) or the configured token standing in for it (``Fallback``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Resolved:
    """A field value obtained from the repository."""

    value: str

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass(frozen=True)
class Fallback:
    """A configured token substituted for a value that could not be determined."""

    token: str
    reason: str = ""

    @property
    def value(self) -> str:
        return self.token

    @property
    def is_fallback(self) -> bool:
        return True


FieldResult: TypeAlias = Resolved | Fallback


def first_resolved(*candidates: FieldResult | None, default: FieldResult) -> FieldResult:
    """Return the first candidate that is present, in precedence order.

    Later candidates are only consulted when every earlier one is absent,
    so a value fixed by a higher-precedence source can never be replaced.
    """
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return default
