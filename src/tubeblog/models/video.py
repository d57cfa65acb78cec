"""Video-related data models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CaptionTrack:
    """A caption track offered by the provider for one language."""

    language_code: str
    is_automatic: bool = False
    # Provider handle used to fetch the cues
    source: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class VideoInfo:
    """Metadata and sanitized transcript of a single YouTube video."""

    title: str
    url: str
    transcript: str
    duration: Optional[timedelta] = None
    thumbnail_url: Optional[str] = None
    publish_date: Optional[datetime] = None
    author: Optional[str] = None

    @property
    def word_count(self) -> int:
        return len(self.transcript.split())

    def to_dict(self) -> Dict[str, Any]:
        """Convert video info to a JSON-serializable dictionary."""
        return {
            "title": self.title,
            "url": self.url,
            "transcript": self.transcript,
            "duration": self.duration.total_seconds() if self.duration is not None else None,
            "thumbnail_url": self.thumbnail_url,
            "publish_date": self.publish_date.isoformat() if self.publish_date else None,
            "author": self.author,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VideoInfo":
        """Create video info from a dictionary produced by ``to_dict``."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        duration = data.get("duration")
        publish_date = data.get("publish_date")
        return cls(
            title=data["title"],
            url=data["url"],
            transcript=data["transcript"],
            duration=timedelta(seconds=duration) if duration is not None else None,
            thumbnail_url=data.get("thumbnail_url"),
            publish_date=datetime.fromisoformat(publish_date) if publish_date else None,
            author=data.get("author"),
        )
