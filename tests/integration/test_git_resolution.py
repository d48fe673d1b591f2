"""
Integration tests resolving descriptors of real git repositories.

Creates repositories with the git executable and checks:
- Tag, release branch and untagged version derivation
- Dirty tree detection
- Fallbacks for empty repositories and plain directories
- The CLI end to end, including exit status and stdout on errors
"""

import json
import shutil

import pytest

from repodesc.core.models.config import DescriptorConfig
from repodesc.plugins.vcs.git import GitVCSProvider
from repodesc.services.resolution import DescriptorResolver

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available"),
]


@pytest.fixture
def resolver():
    return DescriptorResolver(GitVCSProvider(), DescriptorConfig(), environ={})


def _head(git, repo):
    return git("rev-parse", "--short=7", "HEAD", cwd=repo)


class TestTaggedRepository:
    def test_tag_with_commits_after(self, resolver, temp_git_repo, git, git_commit):
        """Two commits past annotated tag 1.2.3 on master."""
        git("tag", "-a", "1.2.3", "-m", "Release 1.2.3", cwd=temp_git_repo)
        git_commit("First")
        head = git_commit("Second")

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.semver == "1.2.3"
        assert descriptor.version == f"1.2.3-2-g{head}"
        assert descriptor.commit == head
        assert descriptor.stage == "master"
        assert descriptor.is_dirty == "false"

    def test_dirty_tagged_repository(self, resolver, temp_git_repo, git):
        git("tag", "-a", "0.1.0", "-m", "Release 0.1.0", cwd=temp_git_repo)
        (temp_git_repo / "README.md").write_text("changed\n")

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.is_dirty == "true"
        assert descriptor.version == f"0.1.0-0-g{_head(git, temp_git_repo)}-dirty"
        assert descriptor.commit == _head(git, temp_git_repo)

    def test_lightweight_tags_ignored(self, resolver, temp_git_repo, git):
        """Only annotated tags describe a version."""
        git("tag", "1.0.0", cwd=temp_git_repo)

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.semver == "no_semver"
        assert descriptor.version.startswith("no_tag-1-g")


class TestReleaseBranch:
    def test_release_branch_overrides_tag(self, resolver, temp_git_repo, git):
        git("tag", "-a", "1.2.3", "-m", "Release 1.2.3", cwd=temp_git_repo)
        git("checkout", "-b", "release/2.0.0", cwd=temp_git_repo)

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.branch == "release/2.0.0"
        assert descriptor.stage == "release"
        assert descriptor.semver == "2.0.0"
        assert descriptor.version.startswith("1.2.3-0-g")

    def test_release_branch_without_tags(self, resolver, temp_git_repo, git):
        git("checkout", "-b", "release/0.9.0", cwd=temp_git_repo)

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.semver == "0.9.0"
        assert descriptor.version == f"no_tag-1-g{_head(git, temp_git_repo)}"


class TestUntaggedRepository:
    def test_synthetic_version(self, resolver, temp_git_repo, git, git_commit):
        git("checkout", "-b", "feature/x", cwd=temp_git_repo)
        git_commit("Second")
        head = git_commit("Third")

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.stage == "feature"
        assert descriptor.semver == "no_semver"
        assert descriptor.version == f"no_tag-3-g{head}"

    def test_untracked_file_marks_dirty(self, resolver, temp_git_repo, git):
        (temp_git_repo / "new.txt").write_text("untracked\n")

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.is_dirty == "true"
        assert descriptor.version == f"no_tag-1-g{_head(git, temp_git_repo)}-dirty"
        assert descriptor.commit == _head(git, temp_git_repo)


class TestBranchHandling:
    def test_detached_head_with_ci_reference(self, temp_git_repo, git):
        git("checkout", "--detach", cwd=temp_git_repo)
        resolver = DescriptorResolver(
            GitVCSProvider(), DescriptorConfig(), environ={"CI_COMMIT_REF_NAME": "develop"}
        )

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.branch == "develop"
        assert descriptor.stage == "develop"

    def test_detached_head_without_ci_reference(self, resolver, temp_git_repo, git):
        git("checkout", "--detach", cwd=temp_git_repo)

        descriptor = resolver.resolve(temp_git_repo)

        assert descriptor.branch == "HEAD"
        assert descriptor.stage == "no_stage"

    def test_remote(self, resolver, temp_git_repo, git):
        git("remote", "add", "origin", "https://example.com/team/project.git", cwd=temp_git_repo)
        assert resolver.resolve(temp_git_repo).remote == "https://example.com/team/project.git"

    def test_no_remote(self, resolver, temp_git_repo):
        assert resolver.resolve(temp_git_repo).remote == "no_remote"


class TestFallbacks:
    def test_empty_repository(self, resolver, empty_git_repo):
        """A repository without commits still resolves every field."""
        descriptor = resolver.resolve(empty_git_repo)

        assert descriptor.location == str(empty_git_repo.resolve())
        assert descriptor.commit == "no_commit"
        assert descriptor.version == "no_version"
        assert descriptor.semver == "no_semver"
        assert descriptor.remote == "no_remote"

    def test_plain_directory(self, resolver, tmp_path):
        plain = tmp_path / "plain"
        plain.mkdir()

        descriptor = resolver.resolve(plain)

        assert descriptor.location == str(plain.resolve())
        assert descriptor.branch == "no_branch"
        assert descriptor.stage == "no_stage"
        assert descriptor.is_dirty == "no_status"
        assert descriptor.version == "no_version"

    def test_subdirectory_reports_root(self, resolver, temp_git_repo):
        sub = temp_git_repo / "src"
        sub.mkdir()
        assert resolver.resolve(sub).location == str(temp_git_repo.resolve())

    def test_resolution_does_not_modify_repository(self, resolver, temp_git_repo, git):
        before = git("status", "--porcelain", cwd=temp_git_repo)
        resolver.resolve(temp_git_repo)
        assert git("status", "--porcelain", cwd=temp_git_repo) == before


class TestCommandLine:
    """The installed entry point, run as a subprocess."""

    def test_describe_json(self, run_repodesc, temp_git_repo, git):
        git("tag", "-a", "3.1.4", "-m", "Release", cwd=temp_git_repo)

        result = run_repodesc("describe", str(temp_git_repo))

        assert result.returncode == 0, result.stderr
        data = json.loads(result.stdout)
        assert data["semver"] == "3.1.4"
        assert data["location"] == str(temp_git_repo.resolve())

    def test_output_is_byte_identical(self, run_repodesc, temp_git_repo):
        first = run_repodesc("describe", str(temp_git_repo), "--format", "env")
        second = run_repodesc("describe", str(temp_git_repo), "--format", "env")

        assert first.returncode == 0, first.stderr
        assert first.stdout == second.stdout

    @pytest.mark.parametrize("args", [(), ("a", "b")])
    def test_wrong_argument_count(self, run_repodesc, tmp_path, args):
        result = run_repodesc("describe", *args, cwd=tmp_path)

        assert result.returncode == 1
        assert result.stdout == ""
        assert "wrong number of arguments" in result.stderr

    def test_missing_path(self, run_repodesc, tmp_path):
        result = run_repodesc("describe", str(tmp_path / "missing"))

        assert result.returncode == 1
        assert result.stdout == ""
        assert "Path not found" in result.stderr

    def test_file_path(self, run_repodesc, tmp_path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        result = run_repodesc("describe", str(file_path))

        assert result.returncode == 1
        assert result.stdout == ""

    def test_check_fails_on_untagged(self, run_repodesc, temp_git_repo):
        result = run_repodesc("check", str(temp_git_repo))

        assert result.returncode == 1
        assert "no semantic version" in result.stderr
