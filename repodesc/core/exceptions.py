"""
Custom exception hierarchy for repodesc.

Fatal errors (bad invocation, unusable config) propagate to the CLI and
abort the run. Repository query errors are recoverable: the resolver
absorbs them into per-field fallback tokens.
"""

from __future__ import annotations


class RepodescException(Exception):
    """
    Base exception for all repodesc errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, commands, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether the caller may continue with degraded data
    """

    exit_code: int = 1
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class RepodescConfigError(RepodescException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(RepodescConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for missing files, non-file paths, permission errors and
    TOML parsing errors.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(RepodescConfigError, ValueError):
    """Invalid or missing configuration value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class RepodescValidationError(RepodescException, ValueError):
    """Base class for input validation errors."""

    pass


class UsageError(RepodescValidationError):
    """Wrong number of command-line arguments."""

    def __init__(
        self,
        message: str = "wrong number of arguments",
        *,
        expected: int | None = None,
        received: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if expected is not None:
            ctx["expected"] = expected
        if received is not None:
            ctx["received"] = received
        super().__init__(message, context=ctx, cause=cause)


class RepositoryPathError(RepodescValidationError):
    """
    Repository path argument is unusable.

    Raised when the path does not exist or is not a directory.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# VCS Errors
# =============================================================================


class RepodescVCSError(RepodescException):
    """Base class for version control errors."""

    pass


class VCSQueryError(RepodescVCSError):
    """
    A single read-only repository query failed.

    Expected conditions such as a missing remote, an empty repository or a
    path outside any work tree end up here. The resolver substitutes the
    field's fallback token and carries on.
    """

    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = " ".join(command)
        if returncode is not None:
            ctx["returncode"] = returncode
        if stderr:
            ctx["stderr"] = stderr
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Plugin Errors
# =============================================================================


class RepodescPluginError(RepodescException):
    """Base class for plugin-related errors."""

    pass


class PluginNotFoundError(RepodescPluginError):
    """Requested plugin is not registered."""

    def __init__(
        self,
        message: str,
        *,
        plugin_name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if plugin_name:
            ctx["plugin_name"] = plugin_name
        super().__init__(message, context=ctx, cause=cause)
