"""
repodesc - repository descriptor for build and release pipelines.

Inspects a git working copy and reports its branch, commit, dirty state,
remote, semantic version, release stage and composite version string.
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("repodesc")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = ["__version__"]
