"""Synthesized streaming for backends without native incremental output.

These helpers decompose an already-complete ChatResponse into chunks. They do
not reduce time-to-first-token; adapters using them report
``supports_native_streaming = False``.
"""

from __future__ import annotations

import re
from typing import AsyncIterator, Callable, Iterable, List

from llm_bridge.types.responses import ChatResponse
from llm_bridge.types.streaming import StreamingChunk

ContentSplitter = Callable[[str], List[str]]

_SENTENCE_BOUNDARY = re.compile(r"[.!?]\s+")


def split_words(content: str) -> List[str]:
    """Split on single spaces, keeping the separator on every piece but the last."""
    words = content.split(" ")
    return [word + " " for word in words[:-1]] + [words[-1]]


def split_sentences(content: str) -> List[str]:
    """Cut after sentence punctuation followed by whitespace; whitespace stays with the sentence."""
    pieces: List[str] = []
    start = 0
    for match in _SENTENCE_BOUNDARY.finditer(content):
        pieces.append(content[start : match.end()])
        start = match.end()
    if start < len(content) or not pieces:
        pieces.append(content[start:])
    return pieces


def split_characters(content: str) -> List[str]:
    return list(content)


def build_chunks(model: str, pieces: Iterable[str]) -> List[StreamingChunk]:
    """
    Wrap pieces as StreamingChunks with ``is_last`` set only on the final one.

    An empty ``pieces`` still yields a single empty final chunk.
    """

    fragments = list(pieces) or [""]
    last = len(fragments) - 1
    return [
        StreamingChunk(model=model, content_fragment=fragment, is_last=index == last)
        for index, fragment in enumerate(fragments)
    ]


async def synthesize_stream(
    response: ChatResponse, splitter: ContentSplitter
) -> AsyncIterator[StreamingChunk]:
    """Yield the chunks of a complete response in order."""
    for chunk in build_chunks(response.model, splitter(response.content)):
        yield chunk


__all__ = [
    "ContentSplitter",
    "split_words",
    "split_sentences",
    "split_characters",
    "build_chunks",
    "synthesize_stream",
]
