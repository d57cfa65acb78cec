"""Video metadata and playlists through yt-dlp, captions through youtube-transcript-api."""

import logging
import re
from typing import Dict, List, Optional

import yt_dlp
from yt_dlp.utils import DownloadError
from youtube_transcript_api import (
    AgeRestricted,
    CouldNotRetrieveTranscript,
    InvalidVideoId,
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
    VideoUnplayable,
    YouTubeRequestFailed,
    YouTubeTranscriptApi,
)

from ..models.video import CaptionTrack
from ..utils.errors import SourceUnavailableError, TranscriptUnavailableError
from ..utils.retry import NetworkError, TemporaryServiceError
from ..utils.urls import build_video_url

logger = logging.getLogger(__name__)

# Configure yt-dlp logging to be silent
logging.getLogger("yt_dlp").setLevel(logging.CRITICAL)

UNAVAILABLE_MARKERS = (
    "video unavailable",
    "this video is unavailable",
    "private video",
    "has been removed",
    "is not available in your country",
    "not made this video available in your country",
    "members-only",
    "this video is no longer available",
)


def classify_download_error(error: Exception, video_id: str) -> Exception:
    """Translate a yt-dlp failure into a tubeblog or retryable error."""
    message = str(error)
    lowered = message.lower()

    if any(marker in lowered for marker in UNAVAILABLE_MARKERS):
        return SourceUnavailableError(video_id, reason=message)
    if "http error 429" in lowered or re.search(r"http error 5\d\d", lowered):
        return TemporaryServiceError(f"YouTube temporarily unavailable: {message}")
    if any(word in lowered for word in ("network", "connection", "timed out", "timeout")):
        return NetworkError(f"Network error: {message}")
    return error


def classify_transcript_error(error: CouldNotRetrieveTranscript, video_id: str) -> Exception:
    """Translate a youtube-transcript-api failure into a tubeblog or retryable error."""
    if isinstance(error, (TranscriptsDisabled, NoTranscriptFound)):
        return TranscriptUnavailableError(
            "No transcript available for this video. The video may not have captions enabled."
        )
    if isinstance(error, (VideoUnavailable, VideoUnplayable, AgeRestricted, InvalidVideoId)):
        return SourceUnavailableError(video_id, reason=type(error).__name__)
    if isinstance(error, (RequestBlocked, YouTubeRequestFailed)):
        return TemporaryServiceError(f"YouTube refused the caption request for {video_id}")
    return error


class YouTubeClient:
    """Metadata and playlist access through yt-dlp, caption access through youtube-transcript-api."""

    def __init__(self, transcript_api: Optional[YouTubeTranscriptApi] = None):
        self.ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
            "extract_flat": False,
            "ignoreerrors": False,
        }
        self.transcript_api = transcript_api or YouTubeTranscriptApi()

    def extract_video(self, video_id: str) -> Dict:
        """Return the yt-dlp info dict for a single video."""
        logger.debug(f"Extracting metadata for video {video_id}")
        try:
            with yt_dlp.YoutubeDL(self.ydl_opts) as ydl:
                info = ydl.extract_info(build_video_url(video_id), download=False)
        except DownloadError as e:
            translated = classify_download_error(e, video_id)
            if translated is e:
                raise
            raise translated from e

        if not info:
            raise SourceUnavailableError(video_id, reason="no metadata returned")
        return info

    def caption_tracks(self, video_id: str) -> List[CaptionTrack]:
        """List the caption tracks a video actually has.

        Manually created tracks come before generated ones. Translation
        targets are not tracks and are never listed.
        """
        try:
            transcript_list = self.transcript_api.list(video_id)
        except CouldNotRetrieveTranscript as e:
            translated = classify_transcript_error(e, video_id)
            if translated is e:
                raise
            raise translated from e

        return [
            CaptionTrack(
                language_code=transcript.language_code,
                is_automatic=transcript.is_generated,
                source=transcript,
            )
            for transcript in sorted(transcript_list, key=lambda t: t.is_generated)
        ]

    def download_captions(self, video_id: str, track: CaptionTrack) -> List[str]:
        """Fetch one caption track and return its cue texts in order."""
        logger.debug(f"Fetching '{track.language_code}' captions for {video_id}")
        try:
            fetched = track.source.fetch()
        except CouldNotRetrieveTranscript as e:
            translated = classify_transcript_error(e, video_id)
            if translated is e:
                raise
            raise translated from e

        cues = []
        for snippet in fetched:
            text = snippet.text.strip()
            if text:
                cues.append(text)
        return cues

    def playlist_video_ids(self, playlist_id: str) -> List[str]:
        """Return the video IDs of a playlist in playlist order."""
        playlist_url = f"https://www.youtube.com/playlist?list={playlist_id}"
        opts = dict(self.ydl_opts, extract_flat="in_playlist")
        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                info = ydl.extract_info(playlist_url, download=False)
        except DownloadError as e:
            translated = classify_download_error(e, playlist_id)
            if translated is e:
                raise
            raise translated from e

        entries = (info or {}).get("entries") or []
        video_ids = [entry["id"] for entry in entries if entry and entry.get("id")]
        logger.info(f"Playlist {playlist_id} contains {len(video_ids)} videos")
        return video_ids


def first_thumbnail(info: Dict) -> Optional[str]:
    if info.get("thumbnail"):
        return info["thumbnail"]
    for thumbnail in info.get("thumbnails") or []:
        if isinstance(thumbnail, dict) and thumbnail.get("url"):
            return thumbnail["url"]
    return None
