"""Markdown list rendering for tables of contents."""

from .generator import TOCGenerator

__all__ = ["TOCGenerator"]
