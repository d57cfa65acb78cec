"""YouTube URL validation and identifier extraction."""

import re
from typing import Optional

from .errors import InvalidUrlError

VIDEO_URL_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([\w-]+)", re.IGNORECASE)
PLAYLIST_URL_PATTERN = re.compile(r"(?:youtube\.com/playlist\?list=)([\w-]+)", re.IGNORECASE)


def _match(pattern: re.Pattern, url) -> Optional[re.Match]:
    if not isinstance(url, str):
        return None
    return pattern.search(url)


def is_valid_video_url(url: str) -> bool:
    """Return True for ``youtube.com/watch?v=`` and ``youtu.be/`` video URLs."""
    return _match(VIDEO_URL_PATTERN, url) is not None


def extract_video_id(url: str) -> str:
    """Return the video ID of a video URL.

    Raises:
        InvalidUrlError: If the URL is not a supported video URL
    """
    match = _match(VIDEO_URL_PATTERN, url)
    if match is None:
        raise InvalidUrlError(f"Could not extract video ID from URL: {url}")
    return match.group(1)


def is_valid_playlist_url(url: str) -> bool:
    return _match(PLAYLIST_URL_PATTERN, url) is not None


def extract_playlist_id(url: str) -> str:
    match = _match(PLAYLIST_URL_PATTERN, url)
    if match is None:
        raise InvalidUrlError(f"Could not extract playlist ID from URL: {url}")
    return match.group(1)


def build_video_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"
