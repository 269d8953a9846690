"""Markdown table-of-contents generation and maintenance."""

from .markers import MarkerHandler
from .models import DEFAULT_MARKER, Heading, Section, SectionTOC, TOCOptions, default_options
from .orchestration import TOC
from .parsing import HeadingParser, split_sections
from .render import TOCGenerator

__all__ = [
    "DEFAULT_MARKER",
    "Heading",
    "HeadingParser",
    "MarkerHandler",
    "Section",
    "SectionTOC",
    "TOC",
    "TOCGenerator",
    "TOCOptions",
    "default_options",
    "split_sections",
]
