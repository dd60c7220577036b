"""
llm_bridge configuration from environment variables.
"""

from __future__ import annotations

import os
from typing import Optional

from llm_bridge.service.errors import LLMConfigurationError
from llm_bridge.types.config import ProviderConfig


def _get_env(name: str) -> Optional[str]:
    v = os.environ.get(name, "").strip()
    return v or None


def get_default_platform() -> Optional[str]:
    return _get_env("LLM_BRIDGE_DEFAULT_PLATFORM")


def get_default_model() -> Optional[str]:
    return _get_env("LLM_BRIDGE_DEFAULT_MODEL")


def get_default_provider_config() -> Optional[ProviderConfig]:
    """ProviderConfig from LLM_BRIDGE_DEFAULT_PLATFORM/MODEL, or None unless both are set."""
    platform = get_default_platform()
    model = get_default_model()
    if not platform or not model:
        return None
    return ProviderConfig(platform=platform, model=model)


def get_backend_timeout() -> Optional[float]:
    """Backend call timeout in seconds. None (no timeout) when unset or <= 0."""
    raw = os.environ.get("LLM_BRIDGE_BACKEND_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise LLMConfigurationError(
            f"LLM_BRIDGE_BACKEND_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from exc
    return timeout if timeout > 0 else None


__all__ = [
    "get_default_platform",
    "get_default_model",
    "get_default_provider_config",
    "get_backend_timeout",
]
