"""
Google Vertex AI generative client boundary.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GoogleGenerationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: Optional[float] = None
    max_output_tokens: Optional[int] = None


class GoogleRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    input: str
    system_instruction: Optional[str] = None
    generation_config: GoogleGenerationConfig = Field(default_factory=GoogleGenerationConfig)
    safety_settings: Dict[str, Any] = Field(default_factory=dict)


class GoogleCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    output: str


class GoogleTokenUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt_tokens: int
    candidates_tokens: int


class GoogleResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    candidates: List[GoogleCandidate] = Field(default_factory=list)
    token_usage: GoogleTokenUsage


class GoogleGenerativeClient(ABC):
    """Abstract Vertex AI client. Implementations: StubGoogleGenerativeClient, or a google-genai wrapper."""

    @abstractmethod
    async def generate_content(self, request: GoogleRequest) -> GoogleResponse:
        ...


class StubGoogleGenerativeClient(GoogleGenerativeClient):
    """Returns a single candidate echoing the input."""

    async def generate_content(self, request: GoogleRequest) -> GoogleResponse:
        await asyncio.sleep(0)
        return GoogleResponse(
            model=request.model,
            candidates=[GoogleCandidate(output=f"Vertex AI response to: {request.input}")],
            token_usage=GoogleTokenUsage(prompt_tokens=9, candidates_tokens=16),
        )


__all__ = [
    "GoogleGenerationConfig",
    "GoogleRequest",
    "GoogleCandidate",
    "GoogleTokenUsage",
    "GoogleResponse",
    "GoogleGenerativeClient",
    "StubGoogleGenerativeClient",
]
