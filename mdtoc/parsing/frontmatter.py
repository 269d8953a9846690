from __future__ import annotations

from typing import Sequence

_OPEN_DELIMITER = "---"
_CLOSE_DELIMITERS = frozenset({"---", "..."})


def find_frontmatter_end(lines: Sequence[str]) -> int:
    """Return the 0-based index of the frontmatter closing delimiter, or -1.

    Frontmatter only exists when the very first line is ``---``. An unclosed
    block is treated as ordinary content so nothing after it is hidden.
    """

    if not lines or lines[0].strip() != _OPEN_DELIMITER:
        return -1

    for index in range(1, len(lines)):
        if lines[index].strip() in _CLOSE_DELIMITERS:
            return index
    return -1


def content_start(lines: Sequence[str]) -> int:
    """First line index that heading and marker scans may look at."""

    end = find_frontmatter_end(lines)
    return end + 1 if end >= 0 else 0


__all__ = ["content_start", "find_frontmatter_end"]
