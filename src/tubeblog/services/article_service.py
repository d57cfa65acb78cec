"""Article generation from one video or a synthesis of several."""

import logging
from datetime import timedelta
from typing import Dict, Sequence

from ..models.article import Article
from ..models.video import VideoInfo
from ..utils.errors import ArgumentError
from ..utils.text import split_into_chunks
from .content_generator import ContentGenerator
from .metadata import (
    calculate_reading_time,
    extract_description,
    extract_tags,
    merge_tags,
)
from .prompts import build_multi_video_prompt, build_prompt

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "how", "what", "why", "when", "where",
})
_THEME_TRIM_CHARS = ":,.!?-"
SECTION_SEPARATOR = "---"


def extract_common_theme(titles: Sequence[str], max_words: int = 2) -> str:
    """Return the most repeated significant title words, or "".

    Words are compared case-insensitively and keep the casing they were
    first seen with. Only words appearing more than once qualify; ties keep
    first-seen order.
    """
    counts: Dict[str, int] = {}
    first_seen: Dict[str, str] = {}

    for title in titles:
        for word in title.split():
            clean_word = word.strip(_THEME_TRIM_CHARS)
            key = clean_word.lower()
            if len(clean_word) <= 3 or key in STOP_WORDS:
                continue
            if key not in counts:
                counts[key] = 0
                first_seen[key] = clean_word
            counts[key] += 1

    repeated = [key for key, count in counts.items() if count > 1]
    repeated.sort(key=lambda key: counts[key], reverse=True)
    return " ".join(first_seen[key] for key in repeated[:max_words])


def build_synthesis_title(videos: Sequence[VideoInfo]) -> str:
    theme = extract_common_theme([video.title for video in videos])
    if not theme:
        return f"Comprehensive Guide: {len(videos)} Essential Videos"
    return f"Complete Guide to {theme}"


def format_duration(duration: timedelta) -> str:
    total_seconds = int(duration.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def build_combined_transcript(videos: Sequence[VideoInfo]) -> str:
    """Merge transcripts into one text with a labelled section per video."""
    lines = ["This blog post is based on the following videos:", ""]
    for index, video in enumerate(videos, start=1):
        lines += [
            f"Video {index}: {video.title}",
            f"Author: {video.author or 'Unknown'}",
            f"URL: {video.url}",
            "",
            "Transcript:",
            video.transcript,
            "",
            SECTION_SEPARATOR,
            "",
        ]
    return "\n".join(lines)


def build_source_overview(videos: Sequence[VideoInfo]) -> str:
    """Markdown "Overview" and "Source Videos" sections for a synthesis."""
    lines = [
        "## Overview",
        "",
        f"This comprehensive guide synthesizes insights from {len(videos)} video(s), "
        "providing you with a complete understanding of the topic.",
        "",
        "## Source Videos",
        "",
    ]
    for index, video in enumerate(videos, start=1):
        lines.append(f"{index}. **[{video.title}]({video.url})**")
        lines.append(f"   - Author: {video.author or 'Unknown'}")
        if video.duration is not None:
            lines.append(f"   - Duration: {format_duration(video.duration)}")
        lines.append("")
    return "\n".join(lines)


class ArticleService:
    """Turns acquired videos into articles using the content generator."""

    def __init__(self, generator: ContentGenerator, chunk_size: int = 1500):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.generator = generator
        self.chunk_size = chunk_size

    async def generate_article(self, video: VideoInfo) -> Article:
        """Generate an article from a single video's transcript."""
        chunks = split_into_chunks(video.transcript, self.chunk_size)
        logger.info(f"Generating article for '{video.title}' from {len(chunks)} chunk(s)")

        is_multi_part = len(chunks) > 1
        prompts = [build_prompt(video.title, chunk, is_multi_part) for chunk in chunks]
        content = (await self.generator.generate_sections(prompts)).strip()

        return Article(
            title=video.title,
            content=content,
            description=extract_description(content),
            tags=tuple(extract_tags(video.title, content)),
            reading_time=calculate_reading_time(content),
            video_url=video.url,
            source_urls=(video.url,),
        )

    async def generate_synthesis(self, videos: Sequence[VideoInfo]) -> Article:
        """Generate one article that synthesizes several videos.

        Tags come from each video's title and raw transcript, not from the
        generated content.
        """
        if not videos:
            raise ArgumentError("At least one video is required")
        if len(videos) == 1:
            return await self.generate_article(videos[0])

        title = build_synthesis_title(videos)
        chunks = split_into_chunks(build_combined_transcript(videos), self.chunk_size)
        logger.info(
            f"Synthesizing '{title}' from {len(videos)} videos in {len(chunks)} chunk(s)"
        )

        is_multi_part = len(chunks) > 1
        prompts = [
            build_multi_video_prompt(title, chunk, is_multi_part, len(videos))
            for chunk in chunks
        ]
        body = await self.generator.generate_sections(prompts)
        content = f"{build_source_overview(videos)}\n{body}".strip()

        tags = merge_tags(extract_tags(video.title, video.transcript) for video in videos)

        return Article(
            title=title,
            content=content,
            description=extract_description(content),
            tags=tuple(tags),
            reading_time=calculate_reading_time(content),
            video_url=videos[0].url,
            source_urls=tuple(video.url for video in videos),
        )
