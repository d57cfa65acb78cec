"""Main tubeblog class for orchestrating the video-to-article workflow."""

import asyncio
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .models.article import Article
from .services.article_service import ArticleService
from .services.article_writer import ArticleWriter
from .services.content_generator import ContentGenerator
from .services.youtube_service import YouTubeService
from .utils.config import load_config, validate_config
from .utils.errors import ArgumentError

logger = logging.getLogger(__name__)


class ArticleProcessor:
    """Central orchestrator for tubeblog."""

    def __init__(
        self,
        config: Optional[Dict] = None,
        youtube_service: Optional[YouTubeService] = None,
        article_service: Optional[ArticleService] = None,
        writer: Optional[ArticleWriter] = None,
    ):
        """Initialize the processor and its services from configuration."""
        self.config = config or load_config()

        config_errors = validate_config(self.config)
        if config_errors:
            error_msg = "Configuration errors: " + "; ".join(config_errors)
            logger.error(error_msg)
            raise ValueError(error_msg)

        self.youtube_service = youtube_service or YouTubeService.from_config(self.config)

        if article_service is None:
            generator = ContentGenerator(
                command=self.config.get("generator_command", "copilot"),
                model=self.config.get("generator_model"),
                timeout=self.config.get("generator_timeout_seconds", 300),
            )
            article_service = ArticleService(generator, self.config.get("chunk_size", 1500))
        self.article_service = article_service

        self.writer = writer or ArticleWriter(self.config.get("output_directory", "./output"))

        logger.debug("tubeblog initialized successfully")

    async def collect_urls(
        self, urls: Sequence[str], playlist_url: Optional[str] = None
    ) -> List[str]:
        """Combine explicit video URLs with the videos of an optional playlist."""
        collected = list(urls)
        if playlist_url:
            playlist_urls = await self.youtube_service.get_playlist_video_urls(playlist_url)
            logger.info(f"Added {len(playlist_urls)} videos from playlist")
            collected.extend(playlist_urls)

        if not collected:
            raise ArgumentError("At least one video URL or a playlist URL is required")
        return collected

    async def create_article(
        self,
        urls: Sequence[str],
        playlist_url: Optional[str] = None,
        refresh: bool = False,
    ) -> Article:
        """Acquire every video and generate a single or synthesized article."""
        video_urls = await self.collect_urls(urls, playlist_url)

        if refresh:
            for url in video_urls:
                await asyncio.to_thread(self.youtube_service.cache.invalidate, url)

        videos = await self.youtube_service.get_video_infos(video_urls)
        return await self.article_service.generate_synthesis(videos)

    async def convert(
        self,
        urls: Sequence[str],
        playlist_url: Optional[str] = None,
        force: bool = False,
        refresh: bool = False,
    ) -> Tuple[Article, Path]:
        """Run the complete pipeline and write the resulting article."""
        start_time = time.time()

        try:
            article = await self.create_article(urls, playlist_url, refresh)
            output_path = await asyncio.to_thread(self.writer.write, article, force)
        except Exception as e:
            processing_time = self._format_processing_time(time.time() - start_time)
            logger.error(f"Conversion failed after {processing_time}: {e}")
            raise

        processing_time = self._format_processing_time(time.time() - start_time)
        logger.info(f"Article '{article.title}' written in {processing_time}")
        return article, output_path

    def _format_processing_time(self, seconds: float) -> str:
        """Format processing time in human-readable format."""
        if seconds < 60:
            return f"{seconds:.1f} seconds"
        elif seconds < 3600:
            return f"{seconds/60:.1f} minutes"
        else:
            return f"{seconds/3600:.1f} hours"
