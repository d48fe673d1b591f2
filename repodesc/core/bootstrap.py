"""
Application bootstrap for repodesc.

Initializes the DI container with the logger and the VCS provider plugins.
This module should be called once at application startup.
"""

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .models.config import LoggingConfig
from .registry import discover_plugins

_initialized = False


def bootstrap(logging_config: LoggingConfig | None = None) -> ServiceContainer:
    """
    Bootstrap the repodesc application.

    Initializes the DI container with:
    - The logger, configured from the [logging] settings section
    - VCS provider plugins

    Args:
        logging_config: Logging settings (defaults if omitted)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, logging_config or LoggingConfig())
    discover_plugins()

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, logging_config: LoggingConfig) -> None:
    """Register core application services."""
    from ..services.logging import RepodescLogger

    def create_logger() -> ILogger:
        return RepodescLogger(
            level=logging_config.level,
            console_enabled=logging_config.console,
            file_enabled=logging_config.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
