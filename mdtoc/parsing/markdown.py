from __future__ import annotations

import logging
import re
from typing import Iterator, List, NamedTuple, Sequence

from mdtoc.models.configs import TOCOptions
from mdtoc.models.heading import Heading
from mdtoc.parsing.frontmatter import content_start
from mdtoc.parsing.utils import AnchorRegistry

logger = logging.getLogger(__name__)

_HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})(?:[ \t]+(?P<title>.*?))?[ \t]*$")
_CLOSING_SEQUENCE = re.compile(r"(?:^|[ \t]+)#+$")
_FENCES = ("```", "~~~")


class HeadingLine(NamedTuple):
    index: int
    level: int
    text: str


def split_lines(content: str) -> List[str]:
    return content.split("\n")


def count_lines(content: str) -> int:
    """Number of lines in ``content``; a trailing newline does not start a new one."""

    if not content:
        return 0
    lines = content.count("\n") + 1
    if content.endswith("\n"):
        lines -= 1
    return lines


def match_heading(line: str) -> HeadingLine | None:
    """Return the heading found on a single (untrimmed) line, with index -1."""

    match = _HEADING_PATTERN.match(line.strip())
    if not match:
        return None
    title = _CLOSING_SEQUENCE.sub("", match.group("title") or "").strip()
    return HeadingLine(index=-1, level=len(match.group("hashes")), text=title)


def iter_heading_lines(lines: Sequence[str], start: int | None = None) -> Iterator[HeadingLine]:
    """Yield ATX headings outside fenced code, skipping frontmatter by default."""

    if start is None:
        start = content_start(lines)

    in_code_block = False
    for index in range(start, len(lines)):
        trimmed = lines[index].strip()
        if trimmed.startswith(_FENCES):
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue

        heading = match_heading(trimmed)
        if heading:
            yield heading._replace(index=index)


class HeadingParser:
    """Parse markdown headings (#, ##, ###, ...) into an ordered Heading list."""

    def __init__(self, options: TOCOptions | None = None) -> None:
        self.options = options or TOCOptions()

    def parse(self, content: str) -> List[Heading]:
        """Headings within the configured level range, in document order."""

        headings = [
            heading
            for heading in self.parse_all_headers(content)
            if self.options.min_level <= heading.level <= self.options.max_level
        ]
        logger.debug(
            "Selected %d headings between levels %d and %d",
            len(headings),
            self.options.min_level,
            self.options.max_level,
        )
        return headings

    def parse_all_headers(self, content: str) -> List[Heading]:
        """Every heading regardless of level, with content ranges resolved."""

        anchors = AnchorRegistry()
        found = list(iter_heading_lines(split_lines(content)))
        end_lines = _resolve_end_lines(found, count_lines(content))

        return [
            Heading(
                level=item.level,
                text=item.text,
                anchor_link=anchors.assign(item.text),
                line=item.index + 1,
                end_line=end_line,
            )
            for item, end_line in zip(found, end_lines)
        ]


def _resolve_end_lines(found: Sequence[HeadingLine], last_line: int) -> List[int]:
    """A heading ends right before the next heading of the same or higher level."""

    end_lines = [last_line] * len(found)
    open_positions: List[int] = []
    for position, item in enumerate(found):
        while open_positions and found[open_positions[-1]].level >= item.level:
            # item.index is 0-based, so it is already the previous 1-based line
            end_lines[open_positions.pop()] = item.index
        open_positions.append(position)
    return end_lines


__all__ = [
    "HeadingLine",
    "HeadingParser",
    "count_lines",
    "iter_heading_lines",
    "match_heading",
    "split_lines",
]
