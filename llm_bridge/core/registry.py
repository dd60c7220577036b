from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List

from llm_bridge.core.interfaces import ProviderFactory
from llm_bridge.service.errors import PlatformNotRegisteredError

logger = logging.getLogger(__name__)


@dataclass
class FactoryRegistry:
    """
    Registry mapping platform names to ProviderFactory instances.

    Names are case-insensitive; registering a name again replaces the previous
    factory. All operations hold ``_lock`` so concurrent hosts can register or
    clear while other threads resolve factories.
    """

    _factories: Dict[str, ProviderFactory] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def register(self, platform: str, factory: ProviderFactory) -> None:
        """Register ``factory`` under ``platform`` (lower-cased), overwriting any prior entry."""

        if not platform:
            raise ValueError("platform must be non-empty")
        key = platform.lower()
        with self._lock:
            replaced = key in self._factories
            self._factories[key] = factory
        logger.debug("Registered factory for platform=%s (replaced=%s)", key, replaced)

    def get_factory(self, platform: str) -> ProviderFactory:
        """
        Resolve the factory for ``platform`` (case-insensitive).

        Raises PlatformNotRegisteredError if nothing is registered under that name.
        """

        with self._lock:
            factory = self._factories.get(platform.lower())
            if factory is None:
                registered: List[str] = list(self._factories.keys())
        if factory is None:
            raise PlatformNotRegisteredError(platform, registered)
        return factory

    def list_platforms(self) -> List[str]:
        with self._lock:
            return list(self._factories.keys())

    def clear(self) -> None:
        """Remove all registered factories."""
        with self._lock:
            self._factories.clear()
        logger.debug("Cleared factory registry")

    def __contains__(self, platform: object) -> bool:
        if not isinstance(platform, str):
            return False
        with self._lock:
            return platform.lower() in self._factories


_global_registry: FactoryRegistry | None = None
_global_registry_lock = threading.Lock()


def get_factory_registry() -> FactoryRegistry:
    """Return the process-wide FactoryRegistry singleton (thread-safe)."""

    global _global_registry
    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = FactoryRegistry()
    return _global_registry


__all__ = ["FactoryRegistry", "get_factory_registry"]
