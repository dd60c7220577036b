"""
Ollama local runtime client boundary.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class OllamaRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    prompt: str
    system: Optional[str] = None
    options: Dict[str, Any] = Field(default_factory=dict)


class OllamaResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    response: str
    prompt_eval_count: int
    eval_count: int


class OllamaClient(ABC):
    """Abstract Ollama client. Implementations: StubOllamaClient, or an HTTP client for /api/generate."""

    @abstractmethod
    async def generate(self, request: OllamaRequest) -> OllamaResponse:
        ...


class StubOllamaClient(OllamaClient):
    """Echoes the prompt back with fixed eval counts."""

    async def generate(self, request: OllamaRequest) -> OllamaResponse:
        await asyncio.sleep(0)
        return OllamaResponse(
            model=request.model,
            response=f"Ollama response to: {request.prompt}",
            prompt_eval_count=8,
            eval_count=13,
        )


__all__ = ["OllamaRequest", "OllamaResponse", "OllamaClient", "StubOllamaClient"]
