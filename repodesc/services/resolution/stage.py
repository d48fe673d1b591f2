"""
Branch-to-stage classification.

Stages are decided by an ordered rule list; the first matching rule wins.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ...core.models.descriptor import Stage


@dataclass(frozen=True)
class StageRule:
    """A named predicate over a branch name and the stage it produces."""

    description: str
    matches: Callable[[str], bool]
    stage: Stage


STAGE_RULES: tuple[StageRule, ...] = (
    StageRule("prefix 'feature/'", lambda b: b.startswith("feature/"), "feature"),
    StageRule("exactly 'develop'", lambda b: b == "develop", "develop"),
    StageRule("exactly 'master'", lambda b: b == "master", "master"),
    StageRule("prefix 'release/'", lambda b: b.startswith("release/"), "release"),
)


def classify_branch(
    branch: str, rules: tuple[StageRule, ...] = STAGE_RULES
) -> Stage | None:
    """Return the stage of the first rule matching branch, or None."""
    for rule in rules:
        if rule.matches(branch):
            return rule.stage
    return None


def release_version(branch: str) -> str:
    """Return the part of a release branch name after its final '/'."""
    return branch.rsplit("/", 1)[-1]
