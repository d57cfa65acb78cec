"""Markdown output for generated articles."""

import logging
import re
from pathlib import Path
from typing import Dict, Union

import yaml

from ..models.article import Article

logger = logging.getLogger(__name__)

FOOTER = "*This blog post was generated from a YouTube video transcript.*"


def slugify(title: str) -> str:
    """Lower-case, drop punctuation and join words with hyphens."""
    slug = re.sub(r"[^\w\s-]", "", title.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = slug.strip("-")
    return slug or "untitled"


def build_front_matter(article: Article) -> Dict:
    return {
        "title": article.title,
        "description": article.description,
        "date": article.created_at.strftime("%Y-%m-%d"),
        "tags": list(article.tags),
        "reading_time": f"{article.reading_time} min read",
        "video_url": article.video_url,
    }


class ArticleWriter:
    """Writes articles as Markdown files with YAML front matter."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def render(self, article: Article) -> str:
        front_matter = yaml.safe_dump(
            build_front_matter(article), sort_keys=False, allow_unicode=True
        ).strip()
        return (
            f"---\n{front_matter}\n---\n\n"
            f"# {article.title}\n\n"
            f"{article.content}\n\n"
            f"---\n\n{FOOTER}\n"
        )

    def file_name(self, article: Article) -> str:
        date = article.created_at.strftime("%Y-%m-%d")
        return f"{date}-{slugify(article.title)}.md"

    def write(self, article: Article, force: bool = False) -> Path:
        """Write the article and return its path.

        Existing files are kept unless ``force`` is set; a numeric suffix is
        added to the new file name instead.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.output_dir / self.file_name(article)

        if file_path.exists() and not force:
            file_path = self._unique_path(file_path)

        file_path.write_text(self.render(article), encoding="utf-8")
        logger.info(f"Wrote article to {file_path}")
        return file_path

    @staticmethod
    def _unique_path(file_path: Path) -> Path:
        counter = 1
        while True:
            candidate = file_path.with_name(f"{file_path.stem}-{counter}{file_path.suffix}")
            if not candidate.exists():
                return candidate
            counter += 1
