"""
Application bootstrap for chksum.

Initializes the DI container with the logger and hash algorithm registry.
Library callers never need this; the CLI calls it once at startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger

if TYPE_CHECKING:
    from .settings import ChksumSettings

_initialized = False


def bootstrap(settings: ChksumSettings | None = None) -> ServiceContainer:
    """
    Bootstrap the chksum application.

    Args:
        settings: Loaded settings (loaded from the environment if omitted)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        from .settings import load_settings

        settings = load_settings()

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: ChksumSettings) -> None:
    """Register core application services."""
    from ..hashing.registry import HashAlgorithmRegistry
    from ..services.logging import ChksumLogger

    def create_logger() -> ILogger:
        return ChksumLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(HashAlgorithmRegistry, factory=HashAlgorithmRegistry)

    if settings.config_error:
        container.resolve(ILogger).warning("%s", settings.config_error)  # type: ignore[type-abstract]


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
