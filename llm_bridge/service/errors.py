from __future__ import annotations


class LLMError(Exception):
    """Base error type for all llm_bridge failures."""


class LLMConfigurationError(LLMError):
    """Misconfiguration of platforms, models, builder fields, or environment."""


class PlatformNotRegisteredError(LLMConfigurationError):
    """No factory is registered under the requested platform name."""

    def __init__(self, platform: str, registered: list[str] | None = None) -> None:
        self.platform = platform
        message = f"Factory for platform '{platform}' has not been registered."
        if registered is not None:
            message += f" Registered platforms: {sorted(registered) or '[]'}"
        super().__init__(message)


class UnsupportedModelError(LLMConfigurationError):
    """Requested model id is not in the resolved factory's allowlist."""

    def __init__(self, platform: str, model: str, supported: tuple[str, ...] = ()) -> None:
        self.platform = platform
        self.model = model
        message = f"Model '{model}' is not supported on platform '{platform}'."
        if supported:
            message += f" Supported: {list(supported)}"
        super().__init__(message)


class MissingFieldError(LLMConfigurationError):
    """Builder ``build()`` called before a required field was set."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"'{field}' must be specified before building the client.")


class NotConfiguredError(LLMError):
    """ChatService used before ``configure()`` selected a provider."""


class LLMProviderError(LLMError):
    """Error raised from a concrete backend client (network, auth, rate limit, ...)."""


class LLMTimeoutError(LLMError):
    """Timeout while waiting for a backend call."""


__all__ = [
    "LLMError",
    "LLMConfigurationError",
    "PlatformNotRegisteredError",
    "UnsupportedModelError",
    "MissingFieldError",
    "NotConfiguredError",
    "LLMProviderError",
    "LLMTimeoutError",
]
