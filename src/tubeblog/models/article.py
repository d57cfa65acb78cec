"""Article model produced by content generation."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple


@dataclass(frozen=True)
class Article:
    """A generated article ready to be handed to the output writer."""

    title: str
    content: str  # Markdown body, without the top-level title heading
    video_url: str  # primary source
    description: str = ""
    tags: Tuple[str, ...] = ()
    reading_time: int = 1  # in minutes
    source_urls: Tuple[str, ...] = ()
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
