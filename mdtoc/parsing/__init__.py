"""Heading discovery for markdown documents."""

from .frontmatter import content_start, find_frontmatter_end
from .markdown import HeadingParser, count_lines, iter_heading_lines, match_heading, split_lines
from .sections import split_sections
from .utils import AnchorRegistry, slugify

__all__ = [
    "AnchorRegistry",
    "HeadingParser",
    "content_start",
    "count_lines",
    "find_frontmatter_end",
    "iter_heading_lines",
    "match_heading",
    "slugify",
    "split_lines",
    "split_sections",
]
