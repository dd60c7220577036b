from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StreamingChunk(BaseModel):
    """Single fragment of a streamed response. Exactly one chunk per stream has ``is_last``."""

    model_config = ConfigDict(frozen=True)

    model: str
    content_fragment: str
    is_last: bool


__all__ = ["StreamingChunk"]
