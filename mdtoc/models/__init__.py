"""Value types shared across the TOC engine."""

from .configs import DEFAULT_MARKER, TOCOptions, default_options
from .heading import Heading, Section
from .marker import (
    MarkerScan,
    MarkerState,
    MarkerValidation,
    SectionTOC,
    TOCBlockInfo,
    TOCMarker,
)

__all__ = [
    "DEFAULT_MARKER",
    "Heading",
    "MarkerScan",
    "MarkerState",
    "MarkerValidation",
    "Section",
    "SectionTOC",
    "TOCBlockInfo",
    "TOCMarker",
    "TOCOptions",
    "default_options",
]
