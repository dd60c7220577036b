"""Test utilities for the llm_bridge package."""

from __future__ import annotations

from typing import AsyncIterator, List

from llm_bridge.types.streaming import StreamingChunk


async def collect(stream: AsyncIterator[StreamingChunk]) -> List[StreamingChunk]:
    """Drain an async chunk stream into a list."""
    return [chunk async for chunk in stream]


def joined(chunks: List[StreamingChunk]) -> str:
    return "".join(chunk.content_fragment for chunk in chunks)
