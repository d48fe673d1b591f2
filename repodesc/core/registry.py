"""
Plugin registry with auto-discovery.

Discovers and registers VCS providers from:
1. Built-in plugins in repodesc.plugins.vcs
2. Entry point plugins from external packages
"""

import importlib
import pkgutil
from types import ModuleType

from .container import ServiceContainer, get_container
from .di import resolve_or_default
from .interfaces.logger import ILogger
from .interfaces.vcs import IVCSProvider

ENTRY_POINT_GROUP = "repodesc.plugins"


def _get_logger() -> ILogger:
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def discover_plugins(package_name: str = "repodesc.plugins") -> None:
    """
    Auto-discover and register plugins.

    Args:
        package_name: Base package to scan for plugins
    """
    container = get_container()
    _discover_builtin_plugins(container, package_name)
    _discover_entrypoint_plugins(container)


def _discover_builtin_plugins(container: ServiceContainer, package_name: str) -> None:
    """Discover VCS providers from the built-in plugins package."""
    try:
        subpkg = importlib.import_module(f"{package_name}.vcs")
    except ImportError as e:
        _get_logger().debug("No VCS plugin package under %s: %s", package_name, e)
        return
    _scan_package_for_plugins(container, subpkg)


def _scan_package_for_plugins(container: ServiceContainer, package: ModuleType) -> None:
    """Scan a package for provider classes and register them."""
    package_path = getattr(package, "__path__", None)
    if not package_path:
        return

    for _importer, modname, _ispkg in pkgutil.iter_modules(package_path):
        # Skip private modules and base classes
        if modname.startswith("_") or modname == "base":
            continue

        try:
            module = importlib.import_module(f"{package.__name__}.{modname}")
        except ImportError as e:
            _get_logger().debug("Failed to import plugin module %s: %s", modname, e)
            continue

        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if _implements(attr, IVCSProvider):
                container.register_vcs_provider(attr().name, attr)


def _implements(cls: object, interface: type) -> bool:
    """
    Check if a class implements an interface.

    Returns True if cls is a concrete subclass of interface
    (not the interface itself and not abstract).
    """
    return (
        isinstance(cls, type)
        and issubclass(cls, interface)
        and cls is not interface
        and not getattr(cls, "__abstractmethods__", set())
    )


def _discover_entrypoint_plugins(container: ServiceContainer) -> None:
    """
    Discover VCS providers registered via entry points.

    External packages can register providers in their pyproject.toml:

        [project.entry-points."repodesc.plugins"]
        hg = "my_package.provider:MercurialProvider"
    """
    from importlib.metadata import entry_points

    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            plugin_cls = ep.load()
        except Exception as e:
            # Broken external plugins must not break resolution
            _get_logger().warning("Failed to load entry point plugin %s: %s", ep.name, e)
            continue
        if _implements(plugin_cls, IVCSProvider):
            container.register_vcs_provider(plugin_cls().name, plugin_cls)
