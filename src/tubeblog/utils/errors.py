"""Exception hierarchy for tubeblog."""

from typing import Optional


class TubeBlogError(Exception):
    """Base class for all tubeblog errors."""
    pass


class InvalidUrlError(TubeBlogError):
    """Raised when a URL is malformed or not a supported YouTube URL."""
    pass


class SourceUnavailableError(InvalidUrlError):
    """Raised when a video is private, deleted or region-restricted."""

    def __init__(self, video_id: str, reason: Optional[str] = None):
        self.video_id = video_id
        self.reason = reason
        message = (
            "Video is not available. It may be private, deleted, or region-restricted. "
            f"Video ID: {video_id}"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TranscriptUnavailableError(TubeBlogError):
    """Raised when a video has no caption tracks at all."""
    pass


class TranscriptTooLongError(TubeBlogError):
    """Raised when a sanitized transcript exceeds the configured word limit."""

    def __init__(self, word_count: int, max_words: int):
        self.word_count = word_count
        self.max_words = max_words
        super().__init__(
            f"Transcript exceeds maximum length of {max_words} words ({word_count} words)"
        )


class GenerationFailedError(TubeBlogError):
    """Raised when the external generation tool cannot produce content.

    ``launched`` is False when the tool could not be started at all
    (missing executable, no permission), True when it ran and failed.
    """

    def __init__(
        self,
        message: str,
        exit_code: Optional[int] = None,
        stderr: str = "",
        launched: bool = True,
    ):
        self.exit_code = exit_code
        self.stderr = stderr
        self.launched = launched
        super().__init__(message)


class ArgumentError(TubeBlogError, ValueError):
    """Raised when a caller passes arguments that cannot be processed."""
    pass


# Retrying these cannot succeed: the URL or the transcript will not change.
PERMANENT_ERRORS = (InvalidUrlError, TranscriptUnavailableError, TranscriptTooLongError)
