"""File-backed cache of fetched video information.

Each record lives in ``<cache_dir>/<sha256(url)>.json``. The file's
modification time is the TTL clock: a record older than the TTL is deleted
on read and reported as a miss. Unreadable or corrupt records are also
reported as a miss so that a broken cache never blocks a fresh fetch.
"""

import hashlib
import json
import logging
import os
import tempfile
import time
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

from ..models.video import VideoInfo

logger = logging.getLogger(__name__)


def cache_key(url: str) -> str:
    """Return the hex-encoded SHA-256 digest of the URL."""
    return hashlib.sha256(url.encode("utf-8")).hexdigest().upper()


class VideoCache:
    """TTL-based cache mapping a source URL to its ``VideoInfo``."""

    def __init__(self, cache_dir: Union[str, Path], ttl: timedelta = timedelta(days=7)):
        self.cache_dir = Path(cache_dir)
        self.ttl = ttl

    def path_for(self, url: str) -> Path:
        return self.cache_dir / f"{cache_key(url)}.json"

    def get(self, url: str) -> Optional[VideoInfo]:
        """Return the cached video info for ``url``, or None on a miss."""
        cache_file = self.path_for(url)

        try:
            modified = cache_file.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Cannot stat cache file {cache_file.name}: {e}")
            return None

        age = time.time() - modified
        if age > self.ttl.total_seconds():
            logger.debug(f"Cache record expired for {url} (age {age:.0f}s)")
            cache_file.unlink(missing_ok=True)
            return None

        try:
            data = json.loads(cache_file.read_text(encoding="utf-8"))
            info = VideoInfo.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError, OverflowError) as e:
            logger.warning(f"Ignoring unreadable cache record for {url}: {e}")
            return None

        logger.debug(f"Cache hit for {url}")
        return info

    def put(self, url: str, info: VideoInfo) -> None:
        """Write ``info`` for ``url``, replacing any existing record.

        The record is written to a temporary file and renamed into place so
        that readers never observe a partially written record.
        """
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        cache_file = self.path_for(url)

        fd, temp_path = tempfile.mkstemp(
            dir=self.cache_dir, prefix=f".{cache_file.stem}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as temp_file:
                json.dump(info.to_dict(), temp_file, indent=2, ensure_ascii=False)
            os.replace(temp_path, cache_file)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise

        logger.debug(f"Cached video info for {url} at {cache_file.name}")

    def invalidate(self, url: str) -> bool:
        """Remove the record for ``url``. Returns True if one existed."""
        cache_file = self.path_for(url)
        if not cache_file.exists():
            return False
        cache_file.unlink(missing_ok=True)
        logger.info(f"Removed cached video info for {url}")
        return True
