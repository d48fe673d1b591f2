"""
Version control system provider interface definitions.

A narrow, read-only capability interface: the resolver only needs these
queries, so it can run against a real repository or an in-memory fake.
"""

from abc import ABC, abstractmethod


class IVCSProvider(ABC):
    """
    Interface for read-only repository queries.

    Every query either returns its result or raises
    :class:`~repodesc.core.exceptions.VCSQueryError`. Implementations never
    substitute default values themselves; that is the resolver's job.
    """

    # Value reported by current_branch() when HEAD is detached
    DETACHED_MARKER = "HEAD"

    @property
    @abstractmethod
    def name(self) -> str:
        """
        VCS identifier.

        Examples: 'git', 'hg'
        """
        pass

    @abstractmethod
    def repo_root(self, path: str) -> str:
        """
        Find the repository root containing path.

        Args:
            path: Directory inside the working copy

        Returns:
            Absolute path to the work tree root
        """
        pass

    @abstractmethod
    def current_branch(self, repo_root: str) -> str:
        """
        Get the symbolic name of the current branch.

        Returns:
            Branch name, or DETACHED_MARKER when HEAD is detached
        """
        pass

    @abstractmethod
    def remote_url(self, repo_root: str, remote: str = "origin") -> str:
        """
        Get the URL configured for a remote.

        Args:
            repo_root: Path to repository root
            remote: Remote name (default: origin)
        """
        pass

    @abstractmethod
    def status_is_dirty(self, repo_root: str) -> bool:
        """
        Check the working tree for modified, staged or untracked paths.

        Returns:
            True if porcelain status output is non-empty
        """
        pass

    @abstractmethod
    def describe(self, repo_root: str, dirty_marker: str) -> str:
        """
        Describe HEAD relative to the nearest annotated tag.

        Falls back to the bare abbreviated commit hash when no tag is
        reachable. dirty_marker is appended when tracked files are modified.

        Args:
            repo_root: Path to repository root
            dirty_marker: Suffix appended for a dirty tree
        """
        pass

    @abstractmethod
    def commit_count(self, repo_root: str) -> int:
        """
        Count the commits reachable from HEAD.
        """
        pass

    def is_available(self) -> bool:
        """
        Check if this VCS is available on the system.

        Returns:
            True if the VCS tool is installed
        """
        return True
