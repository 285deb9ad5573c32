"""Score report output."""

from ifr_sketchpad.reporting.formatter import MarkdownFormatter

__all__ = ["MarkdownFormatter"]
