"""Azure OpenAI adapter and factory. Models are Azure deployment ids."""

from __future__ import annotations

from typing import Awaitable, List

from llm_bridge.clients.azure import (
    AzureMessage,
    AzureOpenAIClient,
    AzureRequest,
    AzureResponse,
    StubAzureOpenAIClient,
)
from llm_bridge.core.providers.base import BaseChatStrategy, BaseProviderFactory
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse, UsageStatistics


class AzureOpenAIStrategy(BaseChatStrategy):
    """ChatStrategy backed by an AzureOpenAIClient. Streams word by word."""

    platform = "azure"

    _client: AzureOpenAIClient

    def _build_request(self, prompt: str, options: ChatOptions) -> AzureRequest:
        messages: List[AzureMessage] = []
        if options.system_prompt:
            messages.append(AzureMessage(role="system", content=options.system_prompt))
        messages.append(AzureMessage(role="user", content=prompt))
        return AzureRequest(
            deployment_id=self.model,
            messages=messages,
            temperature=options.temperature,
            max_tokens=options.max_tokens,
            metadata=dict(options.metadata or {}),
        )

    def _call_backend(self, request: AzureRequest) -> Awaitable[AzureResponse]:
        return self._client.create_chat_completion(request)

    def _to_response(self, response: AzureResponse) -> ChatResponse:
        return ChatResponse(
            model=response.model,
            content=response.content,
            usage=UsageStatistics.from_counts(
                response.usage.prompt_tokens, response.usage.completion_tokens
            ),
        )


class AzureFactory(BaseProviderFactory):
    platform = "azure"
    supported_models = ("gpt-4o-mini", "gpt-35-turbo", "gpt-4o")
    strategy_class = AzureOpenAIStrategy
    default_client_class = StubAzureOpenAIClient


__all__ = ["AzureOpenAIStrategy", "AzureFactory"]
