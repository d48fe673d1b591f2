"""
Core infrastructure for repodesc.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Plugin registry with auto-discovery
- Application bootstrap for initialization
- Interface definitions for the VCS provider and logger
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    PluginNotFoundError,
    RepodescConfigError,
    RepodescException,
    RepodescPluginError,
    RepodescValidationError,
    RepodescVCSError,
    RepositoryPathError,
    UsageError,
    VCSQueryError,
)
from .registry import discover_plugins

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "PluginNotFoundError",
    "RepodescConfigError",
    "RepodescException",
    "RepodescPluginError",
    "RepodescVCSError",
    "RepodescValidationError",
    "RepositoryPathError",
    "ServiceContainer",
    "UsageError",
    "VCSQueryError",
    "bootstrap",
    "discover_plugins",
    "get_container",
    "is_initialized",
    "reset",
]
