"""Ollama adapter and factory for locally served models."""

from __future__ import annotations

from typing import Any, Awaitable, Dict

from llm_bridge.clients.ollama import OllamaClient, OllamaRequest, OllamaResponse, StubOllamaClient
from llm_bridge.core.providers.base import BaseChatStrategy, BaseProviderFactory
from llm_bridge.core.streaming import split_characters
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse, UsageStatistics


class OllamaStrategy(BaseChatStrategy):
    """ChatStrategy backed by an OllamaClient. Streams character by character."""

    platform = "ollama"

    _client: OllamaClient

    def _build_request(self, prompt: str, options: ChatOptions) -> OllamaRequest:
        runtime_options: Dict[str, Any] = {
            "temperature": options.temperature,
            "num_predict": options.max_tokens,
        }
        # Metadata keys are Ollama runtime options (e.g. top_k, seed) and win on conflict.
        runtime_options.update(options.metadata or {})
        return OllamaRequest(
            model=self.model,
            prompt=prompt,
            system=options.system_prompt,
            options={k: v for k, v in runtime_options.items() if v is not None},
        )

    def _call_backend(self, request: OllamaRequest) -> Awaitable[OllamaResponse]:
        return self._client.generate(request)

    def _to_response(self, response: OllamaResponse) -> ChatResponse:
        return ChatResponse(
            model=response.model,
            content=response.response,
            usage=UsageStatistics.from_counts(response.prompt_eval_count, response.eval_count),
        )

    def _split_content(self, content: str) -> list[str]:
        return split_characters(content)


class OllamaFactory(BaseProviderFactory):
    platform = "ollama"
    supported_models = ("llama3", "mistral", "codellama")
    strategy_class = OllamaStrategy
    default_client_class = StubOllamaClient


__all__ = ["OllamaStrategy", "OllamaFactory"]
