"""Fluent builder producing a configured chat client with default options."""

from __future__ import annotations

from typing import AsyncIterator

from llm_bridge.service.chat_service import ChatService
from llm_bridge.service.errors import MissingFieldError
from llm_bridge.types.config import ProviderConfig
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse
from llm_bridge.types.streaming import StreamingChunk


class LLMClientBuilder:
    """
    Accumulates platform, model and default options, then configures a ChatService.

        client = (
            LLMClientBuilder()
            .with_platform("ollama")
            .with_model("llama3")
            .with_default_options(ChatOptions(temperature=0.5))
            .build()
        )
    """

    def __init__(self, service: ChatService | None = None) -> None:
        self._service = service if service is not None else ChatService()
        self._platform = ""
        self._model = ""
        self._default_options = ChatOptions()

    def with_platform(self, platform: str) -> "LLMClientBuilder":
        self._platform = platform
        return self

    def with_model(self, model: str) -> "LLMClientBuilder":
        self._model = model
        return self

    def with_default_options(self, options: ChatOptions) -> "LLMClientBuilder":
        """Merge ``options`` into the accumulated defaults; later calls win per field."""
        self._default_options = self._default_options.merged_with(options)
        return self

    def build(self) -> "ConfiguredClient":
        if not self._platform:
            raise MissingFieldError("platform")
        if not self._model:
            raise MissingFieldError("model")
        self._service.configure(ProviderConfig(platform=self._platform, model=self._model))
        return ConfiguredClient(self._service, self._default_options)


class ConfiguredClient:
    """Thin wrapper applying builder defaults beneath per-call options."""

    def __init__(self, service: ChatService, default_options: ChatOptions) -> None:
        self._service = service
        self._default_options = default_options

    @property
    def configuration(self) -> ProviderConfig | None:
        return self._service.get_current_configuration()

    @property
    def default_options(self) -> ChatOptions:
        return self._default_options

    async def send(self, prompt: str, options: ChatOptions | None = None) -> ChatResponse:
        return await self._service.send(prompt, self._default_options.merged_with(options))

    def stream(
        self, prompt: str, options: ChatOptions | None = None
    ) -> AsyncIterator[StreamingChunk]:
        return self._service.stream(prompt, self._default_options.merged_with(options))


__all__ = ["LLMClientBuilder", "ConfiguredClient"]
