"""
Platform adapters and factories, plus the default platform table.

Adding a platform means one adapter/factory module and one entry in
``DEFAULT_FACTORIES``.
"""

from __future__ import annotations

from typing import Dict, Type

from llm_bridge.core.registry import FactoryRegistry, get_factory_registry
from llm_bridge.service.errors import PlatformNotRegisteredError

from .base import BaseChatStrategy, BaseProviderFactory  # noqa: F401
from .azure import AzureFactory, AzureOpenAIStrategy  # noqa: F401
from .bedrock import BedrockFactory, BedrockStrategy  # noqa: F401
from .google import GoogleFactory, GoogleVertexStrategy  # noqa: F401
from .ollama import OllamaFactory, OllamaStrategy  # noqa: F401

DEFAULT_FACTORIES: Dict[str, Type[BaseProviderFactory]] = {
    factory.platform: factory
    for factory in (BedrockFactory, AzureFactory, GoogleFactory, OllamaFactory)
}


def create_factory(platform: str) -> BaseProviderFactory:
    """Instantiate the built-in factory for ``platform`` with its default stub client."""

    factory_class = DEFAULT_FACTORIES.get(platform.lower())
    if factory_class is None:
        raise PlatformNotRegisteredError(platform, list(DEFAULT_FACTORIES))
    return factory_class()


def register_default_factories(registry: FactoryRegistry | None = None) -> FactoryRegistry:
    """Register every built-in platform factory. Call once at bootstrap (or after ``clear()``)."""

    target = registry if registry is not None else get_factory_registry()
    for platform in DEFAULT_FACTORIES:
        target.register(platform, create_factory(platform))
    return target


__all__ = [
    "BaseChatStrategy",
    "BaseProviderFactory",
    "BedrockStrategy",
    "BedrockFactory",
    "AzureOpenAIStrategy",
    "AzureFactory",
    "GoogleVertexStrategy",
    "GoogleFactory",
    "OllamaStrategy",
    "OllamaFactory",
    "DEFAULT_FACTORIES",
    "create_factory",
    "register_default_factories",
]
