"""Caption retrieval and transcript clean-up."""

import logging
from typing import List

from ..models.video import CaptionTrack
from ..utils.errors import TranscriptTooLongError, TranscriptUnavailableError
from ..utils.text import count_words, sanitize_transcript
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def select_track(tracks: List[CaptionTrack]) -> CaptionTrack:
    """Pick the first English track, falling back to the first track."""
    if not tracks:
        raise TranscriptUnavailableError(
            "No transcript available for this video. The video may not have captions enabled."
        )
    for track in tracks:
        if track.language_code.lower().startswith("en"):
            return track
    return tracks[0]


class TranscriptService:
    """Fetches a video's captions and turns them into a plain transcript."""

    def __init__(self, client: YouTubeClient, max_transcript_length: int = 10000):
        self.client = client
        self.max_transcript_length = max_transcript_length

    def fetch(self, video_id: str) -> str:
        """Return the raw caption text for a video, one cue per line."""
        track = select_track(self.client.caption_tracks(video_id))
        logger.info(
            f"Using {'automatic' if track.is_automatic else 'manual'} "
            f"'{track.language_code}' captions for {video_id}"
        )

        cues = self.client.download_captions(video_id, track)
        return "\n".join(cues)

    def get_transcript(self, video_id: str) -> str:
        """Fetch, sanitize and length-check the transcript of a video."""
        transcript = sanitize_transcript(self.fetch(video_id))

        word_count = count_words(transcript)
        if word_count > self.max_transcript_length:
            raise TranscriptTooLongError(word_count, self.max_transcript_length)

        logger.debug(f"Transcript for {video_id}: {word_count} words")
        return transcript
