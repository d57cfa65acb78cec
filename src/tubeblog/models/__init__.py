from .article import Article
from .video import CaptionTrack, VideoInfo

__all__ = ["Article", "CaptionTrack", "VideoInfo"]
