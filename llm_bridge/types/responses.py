from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UsageStatistics(BaseModel):
    """Token accounting for a single backend call."""

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = Field(ge=0)
    completion_tokens: int = Field(ge=0)
    total_tokens: int = Field(ge=0)

    @model_validator(mode="before")
    @classmethod
    def _fill_total(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        prompt = data.get("prompt_tokens")
        completion = data.get("completion_tokens")
        if not isinstance(prompt, int) or not isinstance(completion, int):
            return data
        expected = prompt + completion
        total = data.get("total_tokens")
        if total is None:
            return {**data, "total_tokens": expected}
        if total != expected:
            raise ValueError(
                f"total_tokens={total} does not equal prompt_tokens + completion_tokens ({expected})"
            )
        return data

    @classmethod
    def from_counts(cls, prompt_tokens: int, completion_tokens: int) -> "UsageStatistics":
        return cls(prompt_tokens=prompt_tokens, completion_tokens=completion_tokens)


class ChatResponse(BaseModel):
    """Normalized response produced by every platform adapter."""

    model_config = ConfigDict(frozen=True)

    model: str
    content: str
    usage: UsageStatistics
    additional_data: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["UsageStatistics", "ChatResponse"]
