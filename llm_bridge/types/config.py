from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProviderConfig(BaseModel):
    """Platform/model selection that identifies the active backend of a ChatService."""

    model_config = ConfigDict(frozen=True)

    platform: str
    model: str


__all__ = ["ProviderConfig"]
