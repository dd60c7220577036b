from __future__ import annotations

from typing import AsyncIterator, Protocol, Sequence, runtime_checkable

from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse
from llm_bridge.types.streaming import StreamingChunk


@runtime_checkable
class ChatStrategy(Protocol):
    """
    Platform-agnostic chat adapter interface.

    Each platform adapter translates ChatOptions into its backend's request
    shape and maps the backend response back to ChatResponse. Adapters are
    immutable once constructed: they hold only a backend client handle and
    a model id.
    """

    platform: str
    model: str
    supports_native_streaming: bool

    async def send_message(
        self, prompt: str, options: ChatOptions | None = None
    ) -> ChatResponse:
        """Run a single non-streaming chat completion."""

        ...

    def stream_message(
        self, prompt: str, options: ChatOptions | None = None
    ) -> AsyncIterator[StreamingChunk]:
        """Stream chunks for a chat completion; the final chunk has ``is_last=True``."""

        ...


@runtime_checkable
class ProviderFactory(Protocol):
    """Builds ChatStrategy instances for one platform, gated by its model allowlist."""

    platform: str

    def create_client(self, model: str) -> ChatStrategy:
        """Return a new adapter for ``model`` or raise UnsupportedModelError."""

        ...

    def list_available_models(self) -> Sequence[str]:
        """Models this factory can build, in declaration order."""

        ...


__all__ = ["ChatStrategy", "ProviderFactory"]
