"""Google Vertex AI adapter and factory."""

from __future__ import annotations

from typing import Awaitable

from llm_bridge.clients.google import (
    GoogleGenerationConfig,
    GoogleGenerativeClient,
    GoogleRequest,
    GoogleResponse,
    StubGoogleGenerativeClient,
)
from llm_bridge.core.providers.base import BaseChatStrategy, BaseProviderFactory
from llm_bridge.core.streaming import split_sentences
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse, UsageStatistics


class GoogleVertexStrategy(BaseChatStrategy):
    """ChatStrategy backed by a GoogleGenerativeClient. Streams sentence by sentence."""

    platform = "google"

    _client: GoogleGenerativeClient

    def _build_request(self, prompt: str, options: ChatOptions) -> GoogleRequest:
        return GoogleRequest(
            model=self.model,
            input=prompt,
            system_instruction=options.system_prompt,
            generation_config=GoogleGenerationConfig(
                temperature=options.temperature,
                max_output_tokens=options.max_tokens,
            ),
            safety_settings=dict(options.metadata or {}),
        )

    def _call_backend(self, request: GoogleRequest) -> Awaitable[GoogleResponse]:
        return self._client.generate_content(request)

    def _to_response(self, response: GoogleResponse) -> ChatResponse:
        # Only the first candidate is surfaced.
        content = response.candidates[0].output if response.candidates else ""
        return ChatResponse(
            model=response.model,
            content=content,
            usage=UsageStatistics.from_counts(
                response.token_usage.prompt_tokens, response.token_usage.candidates_tokens
            ),
            additional_data={"candidate_count": len(response.candidates)},
        )

    def _split_content(self, content: str) -> list[str]:
        return split_sentences(content)


class GoogleFactory(BaseProviderFactory):
    platform = "google"
    supported_models = ("gemini-pro", "gemini-1.0-pro", "text-unicorn-latest")
    strategy_class = GoogleVertexStrategy
    default_client_class = StubGoogleGenerativeClient


__all__ = ["GoogleVertexStrategy", "GoogleFactory"]
