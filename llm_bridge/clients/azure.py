"""
Azure OpenAI chat-completions client boundary.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AzureMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user"]
    content: str


class AzureRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    deployment_id: str
    messages: List[AzureMessage]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class AzureUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt_tokens: int
    completion_tokens: int


class AzureResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    content: str
    usage: AzureUsage


class AzureOpenAIClient(ABC):
    """Abstract Azure OpenAI client. Implementations: StubAzureOpenAIClient, or an openai SDK wrapper."""

    @abstractmethod
    async def create_chat_completion(self, request: AzureRequest) -> AzureResponse:
        ...


class StubAzureOpenAIClient(AzureOpenAIClient):
    """Answers the user message with fixed token counts."""

    async def create_chat_completion(self, request: AzureRequest) -> AzureResponse:
        await asyncio.sleep(0)
        user_message = next((m.content for m in request.messages if m.role == "user"), "")
        return AzureResponse(
            model=request.deployment_id,
            content=f"Azure OpenAI response to: {user_message}",
            usage=AzureUsage(prompt_tokens=12, completion_tokens=18),
        )


__all__ = [
    "AzureMessage",
    "AzureRequest",
    "AzureUsage",
    "AzureResponse",
    "AzureOpenAIClient",
    "StubAzureOpenAIClient",
]
