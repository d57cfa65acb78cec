"""Transcript text helpers: sanitizing, word counting and chunking."""

import re
from typing import List

_TIMESTAMP_MARKER = re.compile(r"\[[\d:]+\]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_transcript(transcript: str) -> str:
    """Strip ``[mm:ss]`` style markers and collapse whitespace."""
    transcript = _TIMESTAMP_MARKER.sub("", transcript)
    transcript = _WHITESPACE.sub(" ", transcript)
    return transcript.strip()


def count_words(text: str) -> int:
    return len(text.split())


def split_into_chunks(text: str, chunk_size: int) -> List[str]:
    """Split text into chunks of ``chunk_size`` words, preserving order.

    Every chunk holds exactly ``chunk_size`` words except possibly the last.
    Joining the chunks with single spaces gives back the whitespace-normalized
    input; text without words yields no chunks.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    words = text.split()
    return [
        " ".join(words[start:start + chunk_size])
        for start in range(0, len(words), chunk_size)
    ]
