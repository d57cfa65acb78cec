"""tubeblog: turn YouTube videos into Markdown blog posts."""

__version__ = "1.0.0"
