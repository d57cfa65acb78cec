"""Unit tests for tubeblog.utils.text."""

from __future__ import annotations

import math

import pytest

from tubeblog.utils.text import count_words, sanitize_transcript, split_into_chunks


class TestSanitizeTranscript:
    def test_strips_timestamp_markers(self) -> None:
        raw = "[00:01] Hello there\n[1:02:03] general Kenobi"
        assert sanitize_transcript(raw) == "Hello there general Kenobi"

    def test_collapses_whitespace_and_trims(self) -> None:
        assert sanitize_transcript("  one\t\ttwo \n\n three  ") == "one two three"

    def test_keeps_other_brackets(self) -> None:
        assert sanitize_transcript("[Music] playing") == "[Music] playing"

    def test_empty(self) -> None:
        assert sanitize_transcript("   \n ") == ""


class TestSplitIntoChunks:
    @pytest.mark.parametrize(
        ("word_count", "chunk_size"),
        [(0, 5), (1, 5), (5, 5), (6, 5), (14, 5), (3000, 1500), (3001, 1500), (7, 1)],
    )
    def test_chunk_count_and_reassembly(self, word_count: int, chunk_size: int) -> None:
        words = [f"w{i}" for i in range(word_count)]
        text = "  \n".join(words)

        chunks = split_into_chunks(text, chunk_size)

        assert len(chunks) == math.ceil(word_count / chunk_size)
        assert " ".join(chunks) == " ".join(words)

    def test_all_chunks_full_except_last(self) -> None:
        chunks = split_into_chunks(" ".join(["word"] * 23), 10)
        assert [count_words(c) for c in chunks] == [10, 10, 3]

    def test_preserves_order(self) -> None:
        assert split_into_chunks("a b c d e", 2) == ["a b", "c d", "e"]

    def test_whitespace_only_input_yields_no_chunks(self) -> None:
        assert split_into_chunks(" \t\n ", 3) == []

    @pytest.mark.parametrize("chunk_size", [0, -1])
    def test_rejects_non_positive_chunk_size(self, chunk_size: int) -> None:
        with pytest.raises(ValueError):
            split_into_chunks("a b c", chunk_size)
