from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ChatOptions(BaseModel):
    """Per-call generation options shared by every platform adapter."""

    model_config = ConfigDict(frozen=True)

    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    system_prompt: Optional[str] = None
    streaming: Optional[bool] = None  # advisory only; adapters do not branch on it
    metadata: Optional[Dict[str, Any]] = None  # backend-specific passthrough

    def merged_with(self, overrides: "ChatOptions | None") -> "ChatOptions":
        """
        Return a copy with every non-None field of ``overrides`` applied.

        The merge is shallow: ``metadata`` from ``overrides`` replaces ours as a whole.
        """

        if overrides is None:
            return self
        # Iterating the model yields live field values, so metadata entries keep their identity.
        return self.model_copy(update={name: value for name, value in overrides if value is not None})


__all__ = ["ChatOptions"]
