"""TOC marker discovery and in-place editing."""

from .handler import MarkerHandler, blank_run, toc_block_line_count

__all__ = ["MarkerHandler", "blank_run", "toc_block_line_count"]
