"""
Service container for repodesc.

Holds the process-wide logger provider and the table of VCS providers that
plugin discovery fills. Lookups for an unknown provider name fail with
PluginNotFoundError naming the registered ones.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

from .exceptions import PluginNotFoundError
from .interfaces.vcs import IVCSProvider

T = TypeVar("T")


class ServiceContainer:
    """Process-wide registry of services and VCS provider classes."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._services: dict[type, providers.Singleton] = {}
        self._vcs_providers: dict[str, type[IVCSProvider]] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the global container; the next lookup starts empty."""
        cls._instance = None

    def register_singleton(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Bind interface to a lazily built, shared instance."""
        self._services[interface] = providers.Singleton(factory)

    def resolve(self, interface: type[T]) -> T:
        """
        Get the instance bound to interface.

        Raises:
            KeyError: If nothing is bound to interface
        """
        return self._services[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Get the instance bound to interface, or None before bootstrap."""
        provider = self._services.get(interface)
        return provider() if provider is not None else None

    def register_vcs_provider(self, name: str, provider_class: type[IVCSProvider]) -> None:
        self._vcs_providers[name] = provider_class

    def get_vcs_provider(self, name: str = "git") -> IVCSProvider:
        """
        Instantiate the VCS provider registered under name.

        Raises:
            PluginNotFoundError: If no provider is registered under name
        """
        try:
            provider_class = self._vcs_providers[name]
        except KeyError:
            available = ", ".join(self.list_vcs_providers()) or "none"
            raise PluginNotFoundError(
                f"No VCS provider registered: {name} (available: {available})",
                plugin_name=name,
            ) from None
        return provider_class()

    def list_vcs_providers(self) -> list[str]:
        return sorted(self._vcs_providers)


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()
