from .options import ChatOptions
from .config import ProviderConfig
from .responses import ChatResponse, UsageStatistics
from .streaming import StreamingChunk

__all__ = [
    "ChatOptions",
    "ProviderConfig",
    "ChatResponse",
    "UsageStatistics",
    "StreamingChunk",
]
