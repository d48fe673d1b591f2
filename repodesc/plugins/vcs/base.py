"""
Base VCS provider.

Shared plumbing for providers that shell out to a command-line tool.
"""

import subprocess
from abc import abstractmethod

from ...core.exceptions import VCSQueryError
from ...core.interfaces.vcs import IVCSProvider


class BaseVCSProvider(IVCSProvider):
    """
    Abstract base class for command-line VCS providers.

    Subclasses describe each query as an argument list; ``_run`` executes it
    and turns every failure into a :class:`VCSQueryError`.
    """

    @property
    @abstractmethod
    def executable(self) -> str:
        """Return the tool to invoke (e.g., 'git')."""
        pass

    def is_available(self) -> bool:
        """Check if the tool is installed."""
        try:
            subprocess.run([self.executable, "--version"], capture_output=True, check=True)
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    def _run(self, args: list[str], cwd: str) -> str:
        """
        Run a tool subcommand and return its stripped stdout.

        Args:
            args: Arguments following the executable name
            cwd: Working directory for the command

        Raises:
            VCSQueryError: If the tool is missing or exits non-zero
        """
        cmd = [self.executable, *args]
        try:
            out = subprocess.run(cmd, cwd=cwd, capture_output=True, check=True)
        except FileNotFoundError as e:
            raise VCSQueryError(
                f"Cannot run {self.executable}: {e.strerror}", command=cmd, cause=e
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode(errors="replace").strip() if e.stderr else None
            raise VCSQueryError(
                f"{self.executable} {args[0]} failed",
                command=cmd,
                returncode=e.returncode,
                stderr=stderr,
                cause=e,
            ) from e
        return out.stdout.decode(errors="replace").strip()
