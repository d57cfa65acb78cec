"""Shared test fixtures for the tubeblog test suite."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

import pytest

from tubeblog.models.video import CaptionTrack, VideoInfo
from tubeblog.services.content_generator import ContentGenerator
from tubeblog.services.youtube_service import YouTubeService
from tubeblog.utils.cache import VideoCache
from tubeblog.utils.errors import PERMANENT_ERRORS
from tubeblog.utils.retry import RetryPolicy

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


class FakeYouTubeClient:
    """In-memory stand-in for YouTubeClient.

    ``failures`` are raised by ``extract_video`` one per call, in order,
    before it starts succeeding.
    """

    def __init__(
        self,
        info: dict[str, Any] | None = None,
        tracks: list[CaptionTrack] | None = None,
        cues: list[str] | None = None,
        failures: list[Exception] | None = None,
        playlist_ids: list[str] | None = None,
    ) -> None:
        self.info = info if info is not None else {
            "title": "Learning Python Decorators",
            "duration": 754,
            "thumbnail": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
            "upload_date": "20240115",
            "uploader": "Code Channel",
        }
        self.tracks = tracks if tracks is not None else [
            CaptionTrack("de"),
            CaptionTrack("en-US", is_automatic=True),
        ]
        self.cues = cues if cues is not None else [
            "[00:01] Welcome to this python tutorial",
            "[00:05]   today we cover   decorators",
        ]
        self.failures = list(failures or [])
        self.playlist_ids = playlist_ids if playlist_ids is not None else ["abc123", "def456"]
        self.extract_calls = 0
        self.downloaded: list[CaptionTrack] = []

    def extract_video(self, video_id: str) -> dict[str, Any]:
        self.extract_calls += 1
        if self.failures:
            raise self.failures.pop(0)
        return dict(self.info, id=video_id)

    def caption_tracks(self, video_id: str) -> list[CaptionTrack]:
        return list(self.tracks)

    def download_captions(self, video_id: str, track: CaptionTrack) -> list[str]:
        self.downloaded.append(track)
        return list(self.cues)

    def playlist_video_ids(self, playlist_id: str) -> list[str]:
        return list(self.playlist_ids)


class RecordingGenerator(ContentGenerator):
    """ContentGenerator that answers in-process instead of running a tool."""

    def __init__(self) -> None:
        super().__init__(command=["fake-tool"])
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return f"Section {len(self.prompts)}: prompt had {len(prompt)} characters"


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture()
def fake_client() -> FakeYouTubeClient:
    return FakeYouTubeClient()


@pytest.fixture()
def recorded_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def cache(tmp_path) -> VideoCache:
    return VideoCache(tmp_path / "cache", ttl=timedelta(days=7))


@pytest.fixture()
def youtube_service(
    cache: VideoCache, fake_client: FakeYouTubeClient, recorded_sleep: RecordingSleep
) -> YouTubeService:
    policy = RetryPolicy(
        max_retries=3, base_delay=2.0, give_up_on=PERMANENT_ERRORS, sleep=recorded_sleep
    )
    return YouTubeService(
        cache,
        client=fake_client,
        retry_policy=policy,
        max_transcript_length=50,
    )


@pytest.fixture()
def generator() -> RecordingGenerator:
    return RecordingGenerator()


@pytest.fixture()
def sample_video() -> VideoInfo:
    return VideoInfo(
        title="Learning Python Decorators",
        url=VIDEO_URL,
        transcript="Welcome to this python tutorial today we cover decorators",
        duration=timedelta(minutes=12, seconds=34),
        thumbnail_url="https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
        author="Code Channel",
    )


@pytest.fixture()
def make_client() -> type[FakeYouTubeClient]:
    """Factory for clients with custom metadata, tracks or failures."""
    return FakeYouTubeClient
