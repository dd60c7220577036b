"""
AWS Bedrock runtime client boundary.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BedrockRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model_id: str
    prompt: str
    system: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    additional_model_request_fields: Dict[str, Any] = Field(default_factory=dict)


class BedrockResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    model_id: str
    output_text: str
    input_tokens: int
    output_tokens: int
    additional_metadata: Dict[str, Any] = Field(default_factory=dict)


class BedrockRuntimeClient(ABC):
    """Abstract Bedrock runtime. Implementations: StubBedrockRuntimeClient, or a boto3 wrapper."""

    @abstractmethod
    async def invoke_model(self, request: BedrockRequest) -> BedrockResponse:
        ...


class StubBedrockRuntimeClient(BedrockRuntimeClient):
    """Echoes the prompt back with fixed token counts."""

    async def invoke_model(self, request: BedrockRequest) -> BedrockResponse:
        await asyncio.sleep(0)
        return BedrockResponse(
            model_id=request.model_id,
            output_text=f"Bedrock response to: {request.prompt}",
            input_tokens=10,
            output_tokens=20,
            additional_metadata={"temperature": request.temperature or 0},
        )


__all__ = ["BedrockRequest", "BedrockResponse", "BedrockRuntimeClient", "StubBedrockRuntimeClient"]
