"""
Backend boundary: one abstract client per platform plus in-process stub clients.

Adapters in ``llm_bridge.core.providers`` only talk to these abstract clients, so a
real SDK-backed client can be swapped in without touching any code upstream.
"""

from .azure import AzureOpenAIClient, StubAzureOpenAIClient
from .bedrock import BedrockRuntimeClient, StubBedrockRuntimeClient
from .google import GoogleGenerativeClient, StubGoogleGenerativeClient
from .ollama import OllamaClient, StubOllamaClient

__all__ = [
    "AzureOpenAIClient",
    "StubAzureOpenAIClient",
    "BedrockRuntimeClient",
    "StubBedrockRuntimeClient",
    "GoogleGenerativeClient",
    "StubGoogleGenerativeClient",
    "OllamaClient",
    "StubOllamaClient",
]
