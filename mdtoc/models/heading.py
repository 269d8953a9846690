from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List


@dataclass(frozen=True, slots=True)
class Heading:
    """An ATX heading with its 1-based source line and content range."""

    level: int
    text: str
    anchor_link: str
    line: int
    end_line: int

    def shifted(self, offset: int) -> "Heading":
        """Return a copy whose line range is moved down by ``offset`` lines."""

        return replace(self, line=self.line + offset, end_line=self.end_line + offset)


@dataclass(frozen=True, slots=True)
class Section:
    """A level-1 heading and the deeper headings that follow it."""

    title: Heading
    sub_headers: List[Heading] = field(default_factory=list)


__all__ = ["Heading", "Section"]
