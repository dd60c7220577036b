"""
LLM call logging helpers.

Each helper writes one record to the ``llm_bridge.service.logger`` logger with
structured ``extra`` fields and never raises: a logging failure must never
surface to the caller.

- Non-streaming: model, token usage and duration.
- Streaming: chunk count and total characters, written once the stream finishes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from llm_bridge.types.config import ProviderConfig
    from llm_bridge.types.responses import ChatResponse

logger = logging.getLogger(__name__)


def _config_fields(config: "ProviderConfig | None") -> dict:
    if config is None:
        return {"platform": "", "configured_model": ""}
    return {"platform": config.platform, "configured_model": config.model}


def log_call(config: "ProviderConfig | None", response: "ChatResponse", duration_ms: int) -> None:
    """Log a successful non-streaming call."""
    try:
        usage = response.usage
        logger.info(
            "LLM call succeeded platform=%s model=%s total_tokens=%s duration_ms=%s",
            config.platform if config else "",
            response.model,
            usage.total_tokens,
            duration_ms,
            extra={
                **_config_fields(config),
                "model": response.model,
                "is_stream": False,
                "input_tokens": usage.prompt_tokens,
                "output_tokens": usage.completion_tokens,
                "total_tokens": usage.total_tokens,
                "duration_ms": duration_ms,
            },
        )
    except Exception:
        logger.exception("Failed to write LLM call log (non-streaming)")


def log_stream(
    config: "ProviderConfig | None",
    chunk_count: int,
    char_count: int,
    duration_ms: int,
) -> None:
    """Log a streaming call after its final chunk was delivered."""
    try:
        logger.info(
            "LLM stream completed platform=%s model=%s chunks=%s duration_ms=%s",
            config.platform if config else "",
            config.model if config else "",
            chunk_count,
            duration_ms,
            extra={
                **_config_fields(config),
                "is_stream": True,
                "chunk_count": chunk_count,
                "char_count": char_count,
                "duration_ms": duration_ms,
            },
        )
    except Exception:
        logger.exception("Failed to write LLM call log (streaming)")


def log_error(
    config: "ProviderConfig | None",
    exc: BaseException,
    duration_ms: int,
    *,
    is_stream: bool = False,
) -> None:
    """Log a failed call. The exception itself is re-raised by the caller."""
    try:
        logger.warning(
            "LLM call failed platform=%s model=%s error=%s: %s",
            config.platform if config else "",
            config.model if config else "",
            type(exc).__name__,
            exc,
            extra={
                **_config_fields(config),
                "is_stream": is_stream,
                "duration_ms": duration_ms,
                "error_type": type(exc).__name__,
                "error_message": str(exc),
            },
        )
    except Exception:
        logger.exception("Failed to write LLM error log")


__all__ = ["log_call", "log_stream", "log_error"]
