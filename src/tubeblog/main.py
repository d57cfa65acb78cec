"""Command-line entry point for tubeblog."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from rich.console import Console

from . import __version__
from .article_processor import ArticleProcessor
from .utils.config import load_config, setup_logging
from .utils.errors import TubeBlogError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tubeblog",
        description="Turn YouTube videos into Markdown blog posts.",
    )
    parser.add_argument("urls", nargs="*", help="YouTube video URLs; several are synthesized into one post")
    parser.add_argument("--playlist", help="YouTube playlist URL whose videos are synthesized")
    parser.add_argument("-o", "--output", help="Output directory (default: OUTPUT_DIRECTORY or ./output)")
    parser.add_argument("-m", "--model", help="Model name passed to the generation tool")
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite existing files")
    parser.add_argument("--refresh", action="store_true", help="Ignore cached video information")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


class TubeBlogApp:
    """Main application class for tubeblog."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    async def run(self, args: argparse.Namespace) -> int:
        try:
            config = load_config()
            if args.output:
                config["output_directory"] = args.output
            if args.model:
                config["generator_model"] = args.model

            setup_logging("DEBUG" if args.verbose else config["log_level"], config.get("log_file"))
            processor = ArticleProcessor(config)
            with self.console.status("Generating article...", spinner="dots"):
                article, output_path = await processor.convert(
                    args.urls,
                    playlist_url=args.playlist,
                    force=args.force,
                    refresh=args.refresh,
                )
        except (TubeBlogError, ValueError) as e:
            self.console.print(f"[red]Error:[/] {e}", highlight=False)
            if args.verbose:
                self.console.print_exception()
            return 1

        self.console.print("[green]✓[/] Blog post generated successfully!")
        if args.verbose:
            self.console.print(f"[dim]Reading time: {article.reading_time} minutes[/]")
            self.console.print(f"[dim]Tags: {', '.join(article.tags)}[/]")
        self.console.print(f"[blue]File:[/] {output_path}", highlight=False)
        return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.urls and not args.playlist:
        parser.error("provide at least one video URL or --playlist")

    app = TubeBlogApp()

    try:
        exit_code = asyncio.run(app.run(args))
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Application error: {e}")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
