from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class MarkerState(str, Enum):
    NONE = "none"
    SINGLE = "single"
    PAIRED = "paired"
    EXCESS = "excess"

    @classmethod
    def from_count(cls, count: int) -> "MarkerState":
        if count == 0:
            return cls.NONE
        if count == 1:
            return cls.SINGLE
        if count == 2:
            return cls.PAIRED
        return cls.EXCESS


@dataclass(frozen=True, slots=True)
class MarkerScan:
    """Result of a single pass over a document's marker lines."""

    state: MarkerState
    positions: Tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.positions)


@dataclass(frozen=True, slots=True)
class TOCMarker:
    """First marker pair found outside frontmatter (0-based lines, -1 when absent)."""

    start_line: int = -1
    end_line: int = -1
    found: bool = False


@dataclass(frozen=True, slots=True)
class MarkerValidation:
    valid: bool
    count: int
    message: str = ""


@dataclass(frozen=True, slots=True)
class TOCBlockInfo:
    """Location of a marker block removed by a cleaning pass (0-based)."""

    start_line: int
    end_line: int


@dataclass(frozen=True, slots=True)
class SectionTOC:
    """Rendered TOC for one section, anchored to its level-1 heading (0-based)."""

    h1_line: int
    toc: str


__all__ = [
    "MarkerScan",
    "MarkerState",
    "MarkerValidation",
    "SectionTOC",
    "TOCBlockInfo",
    "TOCMarker",
]
