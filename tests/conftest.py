"""
Shared pytest fixtures for repodesc tests.

This module provides fixtures for testing against real git repositories:
- git: Helper to run git commands in a directory
- temp_git_repo: Creates an isolated git repository with one commit
- git_commit: Helper to commit changes
- run_repodesc: Helper to run the repodesc CLI via subprocess
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from repodesc.core.bootstrap import reset


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Reset the service container and drop settings from the caller's env."""
    for name in list(os.environ):
        if name.startswith("REPODESC_") or name == "CI_COMMIT_REF_NAME":
            monkeypatch.delenv(name, raising=False)
    reset()
    yield
    reset()


def _git(*args: str, cwd: Path) -> str:
    """Run a git command and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def _init_repo(path: Path, branch: str = "master") -> None:
    """Initialize an empty repository with local identity and no signing."""
    _git("init", cwd=path)
    _git("symbolic-ref", "HEAD", f"refs/heads/{branch}", cwd=path)
    _git("config", "user.email", "test@example.com", cwd=path)
    _git("config", "user.name", "Test User", cwd=path)
    _git("config", "commit.gpgsign", "false", cwd=path)
    _git("config", "tag.gpgsign", "false", cwd=path)


@pytest.fixture
def git() -> Callable[..., str]:
    """
    Provide a helper to run git commands.

    Usage:
        git("tag", "-a", "1.2.3", "-m", "Release", cwd=repo)
    """
    return _git


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Path:
    """Create a git repository without any commits."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _init_repo(repo)
    return repo


@pytest.fixture
def temp_git_repo(empty_git_repo: Path) -> Path:
    """
    Create a temporary git repository on 'master' with an initial commit.

    Returns:
        Path to the temporary repository root
    """
    (empty_git_repo / "README.md").write_text("test repository\n")
    _git("add", "README.md", cwd=empty_git_repo)
    _git("commit", "-m", "Initial commit", cwd=empty_git_repo)
    return empty_git_repo


@pytest.fixture
def git_commit(temp_git_repo: Path) -> Callable[[str], str]:
    """
    Provide a helper to commit all changes.

    Returns:
        A callable that stages everything, commits, and returns the new hash
    """

    def commit(message: str = "Update") -> str:
        _git("add", "-A", cwd=temp_git_repo)
        _git("commit", "-m", message, "--allow-empty", cwd=temp_git_repo)
        return _git("rev-parse", "--short=7", "HEAD", cwd=temp_git_repo)

    return commit


@pytest.fixture
def run_repodesc() -> Callable[..., subprocess.CompletedProcess]:
    """Provide a helper running the repodesc CLI with the current interpreter."""

    def run(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", "repodesc", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
        )

    return run
