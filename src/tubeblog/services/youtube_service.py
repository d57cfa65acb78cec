"""Video information acquisition: URL checks, cache, retries and transcripts."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from ..models.video import VideoInfo
from ..utils.cache import VideoCache
from ..utils.errors import PERMANENT_ERRORS, InvalidUrlError
from ..utils.retry import RetryPolicy
from ..utils.urls import (
    build_video_url,
    extract_playlist_id,
    extract_video_id,
    is_valid_playlist_url,
    is_valid_video_url,
)
from .transcript_service import TranscriptService
from .youtube_client import YouTubeClient, first_thumbnail

logger = logging.getLogger(__name__)


def _publish_date(info: Dict) -> Optional[datetime]:
    timestamp = info.get("timestamp")
    if timestamp:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)

    upload_date = info.get("upload_date")
    if upload_date:
        try:
            return datetime.strptime(upload_date, "%Y%m%d").replace(tzinfo=timezone.utc)
        except ValueError:
            logger.debug(f"Unparseable upload date: {upload_date}")
    return None


class YouTubeService:
    """Service for turning YouTube URLs into ``VideoInfo`` values."""

    def __init__(
        self,
        cache: VideoCache,
        client: Optional[YouTubeClient] = None,
        transcript_service: Optional[TranscriptService] = None,
        retry_policy: Optional[RetryPolicy] = None,
        max_transcript_length: int = 10000,
    ):
        self.cache = cache
        self.client = client or YouTubeClient()
        self.transcript_service = transcript_service or TranscriptService(
            self.client, max_transcript_length
        )
        self.retry_policy = retry_policy or RetryPolicy(
            max_retries=3, base_delay=2.0, give_up_on=PERMANENT_ERRORS
        )

    @classmethod
    def from_config(cls, config: Dict, client: Optional[YouTubeClient] = None) -> "YouTubeService":
        cache = VideoCache(
            config.get("cache_directory", ".cache"),
            ttl=timedelta(days=config.get("cache_ttl_days", 7)),
        )
        retry_policy = RetryPolicy(
            max_retries=config.get("max_retries", 3),
            base_delay=config.get("retry_delay_seconds", 2),
            give_up_on=PERMANENT_ERRORS,
        )
        return cls(
            cache,
            client=client,
            retry_policy=retry_policy,
            max_transcript_length=config.get("max_transcript_length", 10000),
        )

    async def get_video_info(self, url: str) -> VideoInfo:
        """Return metadata and transcript for a video URL.

        Cached values are returned without touching the network. Otherwise
        the fetch runs under the retry policy and its result is cached; if
        every attempt fails nothing is cached and the last error propagates.
        """
        if not is_valid_video_url(url):
            raise InvalidUrlError(f"Invalid YouTube URL: {url}")

        video_id = extract_video_id(url)

        cached = await asyncio.to_thread(self.cache.get, url)
        if cached is not None:
            logger.info(f"Using cached video info for {video_id}")
            return cached

        async def fetch_and_cache() -> VideoInfo:
            info = await asyncio.to_thread(self._fetch_video_info, url, video_id)
            await asyncio.to_thread(self.cache.put, url, info)
            return info

        logger.info(f"Fetching video info for {video_id}")
        video_info = await self.retry_policy.execute(
            fetch_and_cache, description=f"video fetch for {video_id}"
        )
        logger.info(f"Fetched '{video_info.title}' ({video_info.word_count} words)")
        return video_info

    async def get_video_infos(self, urls: List[str]) -> List[VideoInfo]:
        """Acquire several videos one at a time, preserving input order."""
        video_infos = []
        for url in urls:
            video_infos.append(await self.get_video_info(url))
        return video_infos

    async def get_playlist_video_urls(self, playlist_url: str) -> List[str]:
        """Return the canonical watch URLs of every video in a playlist."""
        if not is_valid_playlist_url(playlist_url):
            raise InvalidUrlError(f"Invalid YouTube playlist URL: {playlist_url}")

        playlist_id = extract_playlist_id(playlist_url)
        video_ids = await self.retry_policy.execute(
            lambda: asyncio.to_thread(self.client.playlist_video_ids, playlist_id),
            description=f"playlist fetch for {playlist_id}",
        )
        return [build_video_url(video_id) for video_id in video_ids]

    def _fetch_video_info(self, url: str, video_id: str) -> VideoInfo:
        info = self.client.extract_video(video_id)
        transcript = self.transcript_service.get_transcript(video_id)

        duration = info.get("duration")
        return VideoInfo(
            title=info.get("title") or "Unknown Title",
            url=url,
            transcript=transcript,
            duration=timedelta(seconds=duration) if duration is not None else None,
            thumbnail_url=first_thumbnail(info),
            publish_date=_publish_date(info),
            author=info.get("uploader") or info.get("channel"),
        )
