"""
Provider-agnostic chat layer over multiple LLM platforms.

Public entrypoint:

    from llm_bridge import ChatService, ProviderConfig, register_default_factories

    register_default_factories()
    service = ChatService()
    service.configure(ProviderConfig(platform="azure", model="gpt-4o"))
    response = await service.send("Hello")
"""

from .core.interfaces import ChatStrategy, ProviderFactory  # noqa: F401
from .core.providers import create_factory, register_default_factories  # noqa: F401
from .core.registry import FactoryRegistry, get_factory_registry  # noqa: F401
from .service.builder import ConfiguredClient, LLMClientBuilder  # noqa: F401
from .service.chat_service import ChatService, get_chat_service  # noqa: F401
from .types import ChatOptions, ChatResponse, ProviderConfig, StreamingChunk, UsageStatistics  # noqa: F401

__all__ = [
    "ChatStrategy",
    "ProviderFactory",
    "FactoryRegistry",
    "get_factory_registry",
    "create_factory",
    "register_default_factories",
    "ChatService",
    "get_chat_service",
    "LLMClientBuilder",
    "ConfiguredClient",
    "ChatOptions",
    "ChatResponse",
    "ProviderConfig",
    "StreamingChunk",
    "UsageStatistics",
]
