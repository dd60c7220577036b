"""Base classes for platform adapters and their factories.

BaseChatStrategy encapsulates the shared send/stream flow so platform
subclasses only supply request building, the backend call, response mapping
and a content splitter for synthesized streaming. BaseProviderFactory turns a
model allowlist (plain class data) into validated adapter construction.
"""

from __future__ import annotations

import asyncio
from abc import abstractmethod
from typing import Any, AsyncIterator, Awaitable, ClassVar, Tuple, Type

from llm_bridge import conf
from llm_bridge.core.interfaces import ChatStrategy, ProviderFactory
from llm_bridge.core.streaming import split_words, synthesize_stream
from llm_bridge.service.errors import LLMTimeoutError, UnsupportedModelError
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse
from llm_bridge.types.streaming import StreamingChunk

_NO_OPTIONS = ChatOptions()


class BaseChatStrategy(ChatStrategy):
    """Shared send/stream logic for all platform adapters.

    Subclasses set ``platform`` and implement ``_build_request``,
    ``_call_backend`` and ``_to_response``. They may override ``_split_content``
    to change synthesized stream granularity (default: words).
    """

    platform: ClassVar[str] = "llm"
    supports_native_streaming: ClassVar[bool] = False

    def __init__(self, client: Any, model: str, timeout: float | None = None) -> None:
        self._client = client
        self.model = model
        self._timeout = timeout

    @abstractmethod
    def _build_request(self, prompt: str, options: ChatOptions) -> Any:
        ...

    @abstractmethod
    def _call_backend(self, request: Any) -> Awaitable[Any]:
        ...

    @abstractmethod
    def _to_response(self, response: Any) -> ChatResponse:
        ...

    def _split_content(self, content: str) -> list[str]:
        return split_words(content)

    async def send_message(
        self, prompt: str, options: ChatOptions | None = None
    ) -> ChatResponse:
        request = self._build_request(prompt, options if options is not None else _NO_OPTIONS)
        response = await self._await_backend(self._call_backend(request))
        return self._to_response(response)

    async def stream_message(
        self, prompt: str, options: ChatOptions | None = None
    ) -> AsyncIterator[StreamingChunk]:
        # No native streaming: nothing is yielded until the full response exists,
        # so a backend failure never leaves the caller with partial chunks.
        response = await self.send_message(prompt, options)
        async for chunk in synthesize_stream(response, self._split_content):
            yield chunk

    async def _await_backend(self, call: Awaitable[Any]) -> Any:
        if self._timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise LLMTimeoutError(
                f"{self.platform} call for model={self.model} timed out after {self._timeout}s"
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"


class BaseProviderFactory(ProviderFactory):
    """Allowlist-gated adapter construction for one platform.

    Subclasses declare ``platform``, ``supported_models``, ``strategy_class``
    and ``default_client_class``; no code is needed beyond that.
    """

    platform: ClassVar[str] = "llm"
    supported_models: ClassVar[Tuple[str, ...]] = ()
    strategy_class: ClassVar[Type[BaseChatStrategy]]
    default_client_class: ClassVar[Type[Any]]

    def __init__(self, client: Any = None, timeout: float | None = None) -> None:
        self._client = client if client is not None else self.default_client_class()
        if timeout is None:
            timeout = conf.get_backend_timeout()
        # Matches LLM_BRIDGE_BACKEND_TIMEOUT: zero or negative disables the timeout.
        self._timeout = timeout if timeout is not None and timeout > 0 else None

    @property
    def client(self) -> Any:
        return self._client

    def create_client(self, model: str) -> ChatStrategy:
        if model not in self.supported_models:
            raise UnsupportedModelError(self.platform, model, self.supported_models)
        return self.strategy_class(self._client, model, timeout=self._timeout)

    def list_available_models(self) -> Tuple[str, ...]:
        return self.supported_models


__all__ = ["BaseChatStrategy", "BaseProviderFactory"]
