"""Description, tag and reading-time derivation for generated articles."""

import math
from typing import Iterable, List, Tuple

DEFAULT_DESCRIPTION = "A blog post generated from a YouTube video transcript."
MAX_DESCRIPTION_LENGTH = 160
MIN_DESCRIPTION_LINE_LENGTH = 50
WORDS_PER_MINUTE = 200
MAX_TAGS_PER_SOURCE = 5
MAX_TAGS = 10

# Matched as substrings of the lower-cased text, in this order
TAG_VOCABULARY: Tuple[str, ...] = (
    "dotnet", ".net", "csharp", "c#", "python", "javascript", "typescript",
    "java", "react", "angular", "vue", "docker", "kubernetes", "aws", "azure",
    "tutorial", "guide", "howto", "tips", "tricks", "best practices",
)


def extract_description(content: str) -> str:
    """Use the first non-heading line longer than 50 characters."""
    lines = [line for line in content.split("\n") if line]
    for line in lines:
        if not line.startswith("#") and len(line) > MIN_DESCRIPTION_LINE_LENGTH:
            if len(line) > MAX_DESCRIPTION_LENGTH:
                return line[:MAX_DESCRIPTION_LENGTH - 3] + "..."
            return line
    return DEFAULT_DESCRIPTION


def extract_tags(title: str, content: str) -> List[str]:
    all_text = f"{title} {content}".lower()
    tags = [term for term in TAG_VOCABULARY if term in all_text]
    return tags[:MAX_TAGS_PER_SOURCE]


def merge_tags(tag_lists: Iterable[Iterable[str]], limit: int = MAX_TAGS) -> List[str]:
    """Union tag lists case-insensitively, keeping first-seen order."""
    merged = []
    seen = set()
    for tags in tag_lists:
        for tag in tags:
            key = tag.lower()
            if key not in seen:
                seen.add(key)
                merged.append(tag)
    return merged[:limit]


def calculate_reading_time(content: str) -> int:
    """Reading time in whole minutes at 200 words per minute, at least 1."""
    word_count = len(content.split())
    return max(1, math.ceil(word_count / WORDS_PER_MINUTE))
