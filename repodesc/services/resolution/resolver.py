"""
Repository descriptor resolver.

Derives a RepositoryDescriptor from a working copy through the read-only
queries of an IVCSProvider. Each query is attempted once; a failed query
degrades only its own field to the configured fallback token.

Steps, in order (later steps consume earlier results):

    branch -> remote -> status -> stage -> release semver
           -> describe -> commit / semver / version
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ...core.exceptions import RepositoryPathError, VCSQueryError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.vcs import IVCSProvider
from ...core.models.config import DescriptorConfig
from ...core.models.descriptor import RepositoryDescriptor
from ...core.models.resolution import Fallback, FieldResult, Resolved, first_resolved
from .describe import (
    extract_short_hash,
    has_semver_prefix,
    semver_from_describe,
    synthesize_describe,
)
from .stage import classify_branch, release_version


def validate_repository_path(path: str | os.PathLike[str]) -> Path:
    """
    Check that path exists and is a directory.

    Returns:
        The path made absolute with symlinks resolved

    Raises:
        RepositoryPathError: If the path is missing or not a directory
    """
    candidate = Path(path)
    if not candidate.exists():
        raise RepositoryPathError("Path not found", path=str(path))
    if not candidate.is_dir():
        raise RepositoryPathError("Path is not a directory", path=str(path))
    return candidate.resolve()


@dataclass(frozen=True)
class _DescribeOutcome:
    commit: FieldResult
    semver: FieldResult
    version: FieldResult


class DescriptorResolver:
    """
    Resolve repository descriptors.

    The resolver keeps no state between calls: the VCS provider, the token
    configuration, the logger and the environment mapping are fixed at
    construction and every resolve() starts from scratch.
    """

    def __init__(
        self,
        vcs: IVCSProvider,
        config: DescriptorConfig,
        logger: ILogger | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            vcs: Provider answering repository queries
            config: Dirty marker and per-field fallback tokens
            logger: Diagnostics sink (default: NullLogger)
            environ: Environment to read the CI reference name from
                (default: os.environ)
        """
        if logger is None:
            from ..logging import NullLogger

            logger = NullLogger()
        self._vcs = vcs
        self._config = config
        self._logger = logger
        self._environ = os.environ if environ is None else environ

    def resolve(self, path: str | os.PathLike[str]) -> RepositoryDescriptor:
        """
        Produce the descriptor for the working copy at path.

        Raises:
            RepositoryPathError: If path is missing or not a directory.
                Repository query failures never raise.
        """
        location = self._resolve_location(validate_repository_path(path))
        self._logger.debug("Resolving repository descriptor for %s", location)

        branch = self._resolve_branch(location)
        remote = self._resolve_remote(location)
        is_dirty = self._resolve_status(location)
        stage = self._resolve_stage(branch)

        release_semver = self._resolve_release_semver(branch, stage)
        described = self._resolve_describe(location, is_dirty)
        semver = first_resolved(release_semver, default=described.semver)

        return RepositoryDescriptor(
            location=location,
            branch=branch.value,
            commit=described.commit.value,
            is_dirty=is_dirty.value,
            remote=remote.value,
            semver=semver.value,
            stage=stage.value,
            version=described.version.value,
        )

    # -------------------------------------------------------------------------
    # Individual derivation steps
    # -------------------------------------------------------------------------

    def _query_failed(self, what: str, error: VCSQueryError) -> None:
        self._logger.info("Could not determine %s: %s", what, error)

    def _resolve_location(self, path: Path) -> str:
        """Use the work tree root if path is inside one, else path itself."""
        try:
            root = self._vcs.repo_root(str(path))
        except VCSQueryError as e:
            self._query_failed("repository root", e)
            return str(path)
        return str(Path(root).resolve())

    def _resolve_branch(self, location: str) -> FieldResult:
        try:
            branch = self._vcs.current_branch(location)
        except VCSQueryError as e:
            self._query_failed("branch", e)
            return Fallback(self._config.no_branch_fallback, reason=str(e))

        if branch == self._vcs.DETACHED_MARKER:
            ci_ref = self._environ.get(self._config.ci_ref_env_var)
            if ci_ref:
                self._logger.debug(
                    "Detached HEAD, using %s=%s as branch", self._config.ci_ref_env_var, ci_ref
                )
                return Resolved(ci_ref)
        return Resolved(branch)

    def _resolve_remote(self, location: str) -> FieldResult:
        try:
            return Resolved(self._vcs.remote_url(location, "origin"))
        except VCSQueryError as e:
            self._query_failed("origin remote", e)
            return Fallback(self._config.no_remote_fallback, reason=str(e))

    def _resolve_status(self, location: str) -> FieldResult:
        try:
            dirty = self._vcs.status_is_dirty(location)
        except VCSQueryError as e:
            self._query_failed("working tree status", e)
            return Fallback(self._config.no_status_fallback, reason=str(e))
        return Resolved("true" if dirty else "false")

    def _resolve_stage(self, branch: FieldResult) -> FieldResult:
        if branch.is_fallback:
            return Fallback(self._config.no_stage_fallback, reason="branch unknown")

        stage = classify_branch(branch.value)
        if stage is None:
            self._logger.error("Unexpected branch name, cannot determine stage: %s", branch.value)
            return Fallback(self._config.no_stage_fallback, reason="unexpected branch name")
        return Resolved(stage)

    def _resolve_release_semver(
        self, branch: FieldResult, stage: FieldResult
    ) -> FieldResult | None:
        """Version named by a release branch, or None to defer to describe output."""
        if stage != Resolved("release"):
            return None

        version = release_version(branch.value)
        if not version:
            self._logger.error("Release branch without version suffix: %s", branch.value)
            return None
        self._logger.debug("Release branch %s sets semver %s", branch.value, version)
        return Resolved(version)

    def _resolve_describe(self, location: str, is_dirty: FieldResult) -> _DescribeOutcome:
        cfg = self._config
        try:
            describe = self._vcs.describe(location, cfg.dirty_string)
        except VCSQueryError as e:
            self._query_failed("describe output", e)
            return _DescribeOutcome(
                commit=Fallback(cfg.no_commit_fallback, reason=str(e)),
                semver=Fallback(cfg.no_semver_fallback, reason=str(e)),
                version=Fallback(cfg.no_version_fallback, reason=str(e)),
            )

        short_hash = extract_short_hash(describe, cfg.dirty_string)
        if short_hash is None:
            self._logger.warning("No commit hash found in describe output: %s", describe)
            commit: FieldResult = Fallback(cfg.no_commit_fallback, reason="no hash in describe")
        else:
            commit = Resolved(short_hash)

        if has_semver_prefix(describe):
            return _DescribeOutcome(
                commit=commit,
                semver=Resolved(semver_from_describe(describe)),
                version=Resolved(describe),
            )

        # No version tag reachable: rebuild describe output around the commit count
        self._logger.info("No semver tag reachable from HEAD in %s", location)
        try:
            count = str(self._vcs.commit_count(location))
        except VCSQueryError as e:
            self._query_failed("commit count", e)
            count = cfg.no_count_fallback

        dirty_suffix = cfg.dirty_string if is_dirty == Resolved("true") else ""
        version = synthesize_describe(cfg.no_tag_fallback, count, commit.value, dirty_suffix)
        return _DescribeOutcome(
            commit=commit,
            semver=Fallback(cfg.no_semver_fallback, reason="no semver tag"),
            version=Resolved(version),
        )
