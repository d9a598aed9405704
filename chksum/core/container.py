"""
Service container for chksum.

Holds the process-wide logger and hash algorithm registry once the CLI
has bootstrapped. Library code reaches it through core.di so that it
keeps working, with silent defaults, when nothing was registered.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Maps service types to dependency-injector providers."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Return the shared container, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared container and every registration in it."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance for a service type.

        Args:
            interface: Type callers resolve by, e.g. ILogger
            implementation: Ready-made instance
            factory: Builds the instance on first resolve (used when
                implementation is not given)
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError(f"No implementation or factory given for {interface.__name__}")
        self._providers[interface] = provider

    def register_transient(self, interface: type[T], factory: Callable[..., T]) -> None:
        """Register a factory that builds a new instance on every resolve."""
        self._providers[interface] = providers.Factory(factory)

    def resolve(self, interface: type[T]) -> T:
        """
        Build or fetch the service registered for interface.

        Raises:
            KeyError: If interface was never registered
        """
        provider = self._providers.get(interface)
        if provider is None:
            raise KeyError(f"No provider registered for: {interface}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Like resolve(), but None when interface was never registered."""
        provider = self._providers.get(interface)
        return provider() if provider is not None else None


def get_container() -> ServiceContainer:
    """Return the shared service container."""
    return ServiceContainer.get_instance()
