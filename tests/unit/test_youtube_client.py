"""Unit tests for tubeblog.services.youtube_client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from yt_dlp.utils import DownloadError
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
)

from tubeblog.models.video import CaptionTrack
from tubeblog.services import youtube_client
from tubeblog.services.youtube_client import (
    YouTubeClient,
    classify_download_error,
    classify_transcript_error,
    first_thumbnail,
)
from tubeblog.utils.errors import SourceUnavailableError, TranscriptUnavailableError
from tubeblog.utils.retry import NetworkError, TemporaryServiceError


class FakeYoutubeDL:
    """Replacement for ``yt_dlp.YoutubeDL`` driven by class attributes."""

    result: Any = None
    error: Exception | None = None
    opts_seen: list[dict] = []

    def __init__(self, opts: dict) -> None:
        FakeYoutubeDL.opts_seen.append(opts)

    def __enter__(self) -> FakeYoutubeDL:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def extract_info(self, url: str, download: bool = True) -> Any:
        assert download is False
        if FakeYoutubeDL.error is not None:
            raise FakeYoutubeDL.error
        return FakeYoutubeDL.result


@dataclass
class FakeSnippet:
    text: str
    start: float = 0.0
    duration: float = 1.0


@dataclass
class FakeTranscript:
    """Stands in for ``youtube_transcript_api.Transcript``."""

    language_code: str
    is_generated: bool
    texts: list[str] = field(default_factory=list)
    error: Exception | None = None
    translation_languages: list[dict] = field(default_factory=list)

    def fetch(self) -> list[FakeSnippet]:
        if self.error is not None:
            raise self.error
        return [FakeSnippet(text) for text in self.texts]


class FakeTranscriptApi:
    def __init__(self, transcripts: list[FakeTranscript] | None = None, error: Exception | None = None):
        self.transcripts = transcripts or []
        self.error = error
        self.listed: list[str] = []

    def list(self, video_id: str) -> list[FakeTranscript]:
        self.listed.append(video_id)
        if self.error is not None:
            raise self.error
        return list(self.transcripts)


@pytest.fixture()
def fake_ydl(monkeypatch: pytest.MonkeyPatch) -> type[FakeYoutubeDL]:
    FakeYoutubeDL.result = None
    FakeYoutubeDL.error = None
    FakeYoutubeDL.opts_seen = []
    monkeypatch.setattr(youtube_client.yt_dlp, "YoutubeDL", FakeYoutubeDL)
    return FakeYoutubeDL


class TestCaptionTracks:
    def test_lists_real_tracks_manual_first(self) -> None:
        generated = FakeTranscript("de", is_generated=True)
        manual = FakeTranscript(
            "de", is_generated=False, translation_languages=[{"language": "English", "language_code": "en"}]
        )
        api = FakeTranscriptApi([generated, manual])

        tracks = YouTubeClient(transcript_api=api).caption_tracks("abc")

        assert tracks == [CaptionTrack("de", is_automatic=False), CaptionTrack("de", is_automatic=True)]
        assert tracks[0].source is manual
        assert api.listed == ["abc"]

    def test_disabled_captions(self) -> None:
        api = FakeTranscriptApi(error=TranscriptsDisabled("abc"))
        with pytest.raises(TranscriptUnavailableError):
            YouTubeClient(transcript_api=api).caption_tracks("abc")

    def test_unavailable_video(self) -> None:
        api = FakeTranscriptApi(error=VideoUnavailable("abc"))
        with pytest.raises(SourceUnavailableError) as exc_info:
            YouTubeClient(transcript_api=api).caption_tracks("abc")
        assert exc_info.value.video_id == "abc"

    def test_blocked_request_is_retryable(self) -> None:
        api = FakeTranscriptApi(error=RequestBlocked("abc"))
        with pytest.raises(TemporaryServiceError):
            YouTubeClient(transcript_api=api).caption_tracks("abc")


class TestDownloadCaptions:
    def test_returns_stripped_non_empty_cues_in_order(self) -> None:
        transcript = FakeTranscript("en", False, texts=[" Hello world ", "", "\n", "rock & roll"])
        track = CaptionTrack("en", source=transcript)

        cues = YouTubeClient(transcript_api=FakeTranscriptApi()).download_captions("abc", track)

        assert cues == ["Hello world", "rock & roll"]

    def test_fetch_failure_is_translated(self) -> None:
        transcript = FakeTranscript("en", False, error=TranscriptsDisabled("abc"))
        track = CaptionTrack("en", source=transcript)

        with pytest.raises(TranscriptUnavailableError):
            YouTubeClient(transcript_api=FakeTranscriptApi()).download_captions("abc", track)


class TestClassifyTranscriptError:
    def test_unknown_error_is_returned_unchanged(self) -> None:
        original = CouldNotRetrieveTranscript("abc")
        assert classify_transcript_error(original, "abc") is original


class TestClassifyDownloadError:
    @pytest.mark.parametrize(
        "message",
        [
            "ERROR: [youtube] abc: Video unavailable",
            "ERROR: [youtube] abc: Private video. Sign in if you've been granted access",
            "ERROR: [youtube] abc: The uploader has not made this video available in your country",
        ],
    )
    def test_unavailable_videos(self, message: str) -> None:
        error = classify_download_error(DownloadError(message), "abc")
        assert isinstance(error, SourceUnavailableError)
        assert error.video_id == "abc"
        assert "abc" in str(error)

    def test_rate_limit_is_temporary(self) -> None:
        error = classify_download_error(DownloadError("HTTP Error 429: Too Many Requests"), "abc")
        assert isinstance(error, TemporaryServiceError)

    def test_network_error(self) -> None:
        error = classify_download_error(DownloadError("Connection reset by peer"), "abc")
        assert isinstance(error, NetworkError)

    def test_unknown_error_is_returned_unchanged(self) -> None:
        original = DownloadError("something odd")
        assert classify_download_error(original, "abc") is original


class TestYouTubeClient:
    def test_extract_video(self, fake_ydl) -> None:
        fake_ydl.result = {"id": "abc", "title": "A video"}
        client = YouTubeClient(transcript_api=FakeTranscriptApi())
        assert client.extract_video("abc")["title"] == "A video"
        assert fake_ydl.opts_seen[0]["skip_download"] is True

    def test_extract_video_unavailable(self, fake_ydl) -> None:
        fake_ydl.error = DownloadError("ERROR: Video unavailable")
        with pytest.raises(SourceUnavailableError):
            YouTubeClient(transcript_api=FakeTranscriptApi()).extract_video("abc")

    def test_extract_video_unknown_error_propagates(self, fake_ydl) -> None:
        fake_ydl.error = DownloadError("weird failure")
        with pytest.raises(DownloadError):
            YouTubeClient(transcript_api=FakeTranscriptApi()).extract_video("abc")

    def test_playlist_video_ids(self, fake_ydl) -> None:
        fake_ydl.result = {"entries": [{"id": "one"}, None, {"title": "no id"}, {"id": "two"}]}
        client = YouTubeClient(transcript_api=FakeTranscriptApi())
        assert client.playlist_video_ids("PL1") == ["one", "two"]
        assert fake_ydl.opts_seen[0]["extract_flat"] == "in_playlist"


def test_first_thumbnail() -> None:
    assert first_thumbnail({"thumbnail": "a.jpg"}) == "a.jpg"
    assert first_thumbnail({"thumbnails": [{"id": "0"}, {"url": "b.jpg"}]}) == "b.jpg"
    assert first_thumbnail({}) is None
