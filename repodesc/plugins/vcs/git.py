"""
Git VCS provider.

Implements the read-only repository queries for Git working copies.
"""

from ...core.exceptions import VCSQueryError
from .base import BaseVCSProvider

# Hash length requested from git describe; matches the descriptor's commit field
ABBREV_LENGTH = 7


class GitVCSProvider(BaseVCSProvider):
    """
    Git version control provider.

    Each method maps to a single git invocation run from the repository
    root. Failures surface as VCSQueryError.
    """

    @property
    def name(self) -> str:
        return "git"

    @property
    def executable(self) -> str:
        return "git"

    def repo_root(self, path: str) -> str:
        """Get the git work tree root containing path."""
        return self._run(["rev-parse", "--show-toplevel"], cwd=path)

    def current_branch(self, repo_root: str) -> str:
        """Get the current branch name ('HEAD' when detached)."""
        return self._run(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_root)

    def remote_url(self, repo_root: str, remote: str = "origin") -> str:
        """Get the URL for a remote."""
        return self._run(["remote", "get-url", remote], cwd=repo_root)

    def status_is_dirty(self, repo_root: str) -> bool:
        """Check for any modified, staged or untracked path."""
        return self._run(["status", "--porcelain"], cwd=repo_root) != ""

    def describe(self, repo_root: str, dirty_marker: str) -> str:
        """Describe HEAD as '<tag>-<n>-g<hash>', or the bare hash without tags."""
        return self._run(
            [
                "describe",
                "--always",
                "--long",
                f"--abbrev={ABBREV_LENGTH}",
                f"--dirty={dirty_marker}",
            ],
            cwd=repo_root,
        )

    def commit_count(self, repo_root: str) -> int:
        """Count commits reachable from HEAD."""
        cmd = ["rev-list", "--count", "HEAD"]
        out = self._run(cmd, cwd=repo_root)
        try:
            return int(out)
        except ValueError as e:
            raise VCSQueryError(
                f"Unexpected commit count output: {out!r}", command=["git", *cmd], cause=e
            ) from e
