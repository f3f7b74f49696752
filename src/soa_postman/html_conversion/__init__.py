"""HTML conversion exports."""

from .markdown_converter import html_to_markdown

__all__ = ["html_to_markdown"]
