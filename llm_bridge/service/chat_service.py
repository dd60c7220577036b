"""
ChatService: facade holding the active platform adapter.

Use from application code:

    from llm_bridge import ChatService, ProviderConfig, register_default_factories

    register_default_factories()
    service = ChatService()
    service.configure(ProviderConfig(platform="bedrock", model="anthropic.claude-v2"))
    response = await service.send("Hello")

For streaming:

    async for chunk in service.stream("Hello"):
        # forward chunk.content_fragment to the client
        ...

Switch backends at runtime by calling ``configure`` again; calls already in
flight keep the adapter they started with.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import aclosing
from typing import AsyncIterator, Optional, Tuple

from llm_bridge import conf
from llm_bridge.core.interfaces import ChatStrategy
from llm_bridge.core.registry import FactoryRegistry, get_factory_registry
from llm_bridge.service.errors import NotConfiguredError
from llm_bridge.service.logger import log_call, log_error, log_stream
from llm_bridge.types.config import ProviderConfig
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse
from llm_bridge.types.streaming import StreamingChunk

logger = logging.getLogger(__name__)


class ChatService:
    """Facade that resolves platform adapters through the registry and delegates calls to them.

    Accepts an optional registry for testability. When omitted the
    process-wide singleton is used.
    """

    def __init__(self, registry: FactoryRegistry | None = None) -> None:
        self._registry = registry
        # (adapter, config) are always replaced together.
        self._active: Optional[Tuple[ChatStrategy, ProviderConfig]] = None
        self._lock = threading.Lock()

    # -- private accessors --------------------------------------------------

    def _get_registry(self) -> FactoryRegistry:
        return self._registry if self._registry is not None else get_factory_registry()

    def _bind(self) -> Tuple[ChatStrategy, ProviderConfig]:
        active = self._active
        if active is None:
            raise NotConfiguredError(
                "ChatService has not been configured with a provider yet. Call configure() first."
            )
        return active

    # -- configuration ------------------------------------------------------

    def configure(self, config: ProviderConfig) -> None:
        """Resolve ``config`` to an adapter and make it active. On failure the previous adapter stays."""
        factory = self._get_registry().get_factory(config.platform)
        strategy = factory.create_client(config.model)
        with self._lock:
            previous = self._active[1] if self._active else None
            self._active = (strategy, config)
        logger.info(
            "ChatService configured platform=%s model=%s (previous=%s)",
            config.platform,
            config.model,
            f"{previous.platform}/{previous.model}" if previous else None,
        )

    def get_current_configuration(self) -> ProviderConfig | None:
        active = self._active
        return active[1] if active else None

    # -- chat API -----------------------------------------------------------

    async def send(self, prompt: str, options: ChatOptions | None = None) -> ChatResponse:
        """Send a single-shot message through the active adapter."""
        strategy, config = self._bind()
        t0 = time.monotonic()
        try:
            response = await strategy.send_message(prompt, options)
        except Exception as exc:
            log_error(config, exc, int((time.monotonic() - t0) * 1000))
            raise
        log_call(config, response, int((time.monotonic() - t0) * 1000))
        return response

    def stream(
        self, prompt: str, options: ChatOptions | None = None
    ) -> AsyncIterator[StreamingChunk]:
        """
        Stream chunks from the active adapter.

        Raises NotConfiguredError immediately; otherwise returns an async
        iterator that forwards the adapter's chunks unchanged and in order.
        """
        strategy, config = self._bind()
        return self._forward_stream(strategy, config, prompt, options)

    async def _forward_stream(
        self,
        strategy: ChatStrategy,
        config: ProviderConfig,
        prompt: str,
        options: ChatOptions | None,
    ) -> AsyncIterator[StreamingChunk]:
        t0 = time.monotonic()
        chunk_count = 0
        char_count = 0
        try:
            async with aclosing(strategy.stream_message(prompt, options)) as chunks:
                async for chunk in chunks:
                    chunk_count += 1
                    char_count += len(chunk.content_fragment)
                    yield chunk
        except Exception as exc:
            log_error(config, exc, int((time.monotonic() - t0) * 1000), is_stream=True)
            raise
        log_stream(config, chunk_count, char_count, int((time.monotonic() - t0) * 1000))


_global_service: ChatService | None = None
_global_service_lock = threading.Lock()


def get_chat_service() -> ChatService:
    """
    Return the process-wide ChatService singleton (thread-safe).

    On first use it is configured from LLM_BRIDGE_DEFAULT_PLATFORM and
    LLM_BRIDGE_DEFAULT_MODEL when both are set; the default factories must
    already be registered in that case.
    """
    global _global_service
    if _global_service is None:
        with _global_service_lock:
            if _global_service is None:
                service = ChatService()
                default_config = conf.get_default_provider_config()
                if default_config is not None:
                    service.configure(default_config)
                _global_service = service
    return _global_service


__all__ = ["ChatService", "get_chat_service"]
