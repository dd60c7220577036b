"""AWS Bedrock adapter and factory."""

from __future__ import annotations

from typing import Awaitable

from llm_bridge.clients.bedrock import (
    BedrockRequest,
    BedrockResponse,
    BedrockRuntimeClient,
    StubBedrockRuntimeClient,
)
from llm_bridge.core.providers.base import BaseChatStrategy, BaseProviderFactory
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse, UsageStatistics


class BedrockStrategy(BaseChatStrategy):
    """ChatStrategy backed by a BedrockRuntimeClient. Streams word by word."""

    platform = "bedrock"

    _client: BedrockRuntimeClient

    def _build_request(self, prompt: str, options: ChatOptions) -> BedrockRequest:
        return BedrockRequest(
            model_id=self.model,
            prompt=prompt,
            system=options.system_prompt,
            temperature=options.temperature,
            max_tokens=options.max_tokens,
            additional_model_request_fields=dict(options.metadata or {}),
        )

    def _call_backend(self, request: BedrockRequest) -> Awaitable[BedrockResponse]:
        return self._client.invoke_model(request)

    def _to_response(self, response: BedrockResponse) -> ChatResponse:
        return ChatResponse(
            model=response.model_id,
            content=response.output_text,
            usage=UsageStatistics.from_counts(response.input_tokens, response.output_tokens),
            additional_data=dict(response.additional_metadata),
        )


class BedrockFactory(BaseProviderFactory):
    platform = "bedrock"
    supported_models = ("anthropic.claude-v2", "mistral.large", "meta.llama2-70b")
    strategy_class = BedrockStrategy
    default_client_class = StubBedrockRuntimeClient


__all__ = ["BedrockStrategy", "BedrockFactory"]
