from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from mdtoc.models.configs import DEFAULT_MARKER
from mdtoc.models.marker import (
    MarkerScan,
    MarkerState,
    MarkerValidation,
    SectionTOC,
    TOCBlockInfo,
    TOCMarker,
)
from mdtoc.parsing.frontmatter import content_start
from mdtoc.parsing.markdown import iter_heading_lines, split_lines

logger = logging.getLogger(__name__)


def toc_block_line_count(toc: str) -> int:
    """Size of a section TOC block: blank, marker, blank, content, blank, marker, blank."""

    if not toc:
        return 0
    return 6 + toc.count("\n") + 1


def _join(lines: Sequence[str]) -> str:
    return "\n".join(lines)


def _is_blank(line: str) -> bool:
    return not line.strip()


def blank_run(lines: Sequence[str], start: int) -> int:
    """Number of consecutive blank lines from ``start``.

    The final element of a newline-terminated document is an empty string
    and is never counted.
    """

    end = start
    while end < len(lines) - 1 and _is_blank(lines[end]):
        end += 1
    return end - start


def _absorb_single_blank(tail: List[str]) -> List[str]:
    """Drop the blank line leading ``tail`` when it is the only one."""

    if blank_run(tail, 0) == 1:
        return tail[1:]
    return tail


class MarkerHandler:
    """Find, insert, replace and repair TOC marker pairs in markdown text."""

    def __init__(self, marker: str = DEFAULT_MARKER) -> None:
        self.marker = (marker or "").strip() or DEFAULT_MARKER

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------
    def _positions(self, lines: Sequence[str]) -> List[int]:
        return [
            index
            for index in range(content_start(lines), len(lines))
            if lines[index].strip() == self.marker
        ]

    def _paired_blocks(self, lines: Sequence[str]) -> List[Tuple[int, int]]:
        positions = self._positions(lines)
        return list(zip(positions[0::2], positions[1::2]))

    def scan(self, content: str) -> MarkerScan:
        positions = tuple(self._positions(split_lines(content)))
        return MarkerScan(state=MarkerState.from_count(len(positions)), positions=positions)

    def find_all_markers(self, content: str) -> List[int]:
        return list(self.scan(content).positions)

    def find_markers(self, content: str) -> TOCMarker:
        positions = self.scan(content).positions
        if not positions:
            return TOCMarker()
        if len(positions) == 1:
            return TOCMarker(start_line=positions[0], found=True)
        return TOCMarker(start_line=positions[0], end_line=positions[1], found=True)

    def find_first_heading(self, content: str) -> int:
        heading = next(iter_heading_lines(split_lines(content)), None)
        return heading.index if heading else -1

    def find_h1_lines(self, content: str) -> List[int]:
        return [heading.index for heading in iter_heading_lines(split_lines(content)) if heading.level == 1]

    def extract_existing_toc(self, content: str) -> str:
        """Text between the canonical marker pair, trimmed; empty without a pair."""

        lines = split_lines(content)
        positions = self._positions(lines)
        if len(positions) < 2:
            return ""
        start, end = positions[0], positions[1]
        return _join(lines[start + 1 : end]).strip()

    # ------------------------------------------------------------------
    # Validation and repair
    # ------------------------------------------------------------------
    def validate_markers(self, content: str) -> MarkerValidation:
        count = self.scan(content).count
        if count % 2:
            return MarkerValidation(
                valid=False,
                count=count,
                message=f"Found {count} TOC markers; markers must come in opening/closing pairs",
            )
        return MarkerValidation(valid=True, count=count)

    def cleanup_orphan_markers(self, content: str) -> Tuple[str, int]:
        """Remove the last marker when the total count is odd."""

        lines = split_lines(content)
        positions = self._positions(lines)
        if len(positions) % 2 == 0:
            return content, 0

        orphan = positions[-1]
        logger.warning("Removing orphan TOC marker on line %d", orphan + 1)
        return _join(lines[:orphan] + lines[orphan + 1 :]), 1

    # ------------------------------------------------------------------
    # Single TOC region
    # ------------------------------------------------------------------
    def insert_toc(self, content: str, toc: str) -> str:
        """Fill the region opened by the first marker(s) with ``toc``.

        Without any marker the content is returned unchanged. A lone marker
        gets a synthesized closing marker; with a pair everything between the
        two markers is replaced.
        """

        scan = self.scan(content)
        if scan.state is MarkerState.NONE:
            return content

        lines = split_lines(content)
        start = scan.positions[0]
        if scan.state is MarkerState.SINGLE:
            logger.debug("Closing lone TOC marker on line %d", start + 1)
            tail = _absorb_single_blank(lines[start + 1 :])
            return _join(lines[: start + 1] + ["", toc, "", self.marker] + tail)

        end = scan.positions[1]
        tail = _absorb_single_blank(lines[end + 1 :])
        return _join(lines[: start + 1] + ["", toc, ""] + [lines[end]] + tail)

    def insert_toc_with_cleanup(self, content: str, toc: str) -> str:
        """Like :meth:`insert_toc`, but drops every marker past the first pair.

        Content between the surplus markers goes with them, so exactly two
        markers remain.
        """

        scan = self.scan(content)
        if scan.state is MarkerState.EXCESS:
            lines = split_lines(content)
            first_extra, last_extra = scan.positions[2], scan.positions[-1]
            logger.warning(
                "Dropping %d surplus TOC markers between lines %d and %d",
                scan.count - 2,
                first_extra + 1,
                last_extra + 1,
            )
            content = _join(lines[:first_extra] + lines[last_extra + 1 :])
        return self.insert_toc(content, toc)

    def insert_toc_after_first_heading(self, content: str, toc: str) -> str:
        """Create a marker block after the first heading, or at the top without one.

        Content that already has markers goes through :meth:`insert_toc_with_cleanup`.
        """

        if self.scan(content).state is not MarkerState.NONE:
            return self.insert_toc_with_cleanup(content, toc)

        lines = split_lines(content)
        first_heading = self.find_first_heading(content)
        if first_heading >= 0:
            block = ["", self.marker, "", toc, "", self.marker]
            tail = _absorb_single_blank(lines[first_heading + 1 :])
            return _join(lines[: first_heading + 1] + block + tail)

        # frontmatter always stays on top
        start = content_start(lines)
        block = [self.marker, "", toc, "", self.marker, ""]
        return _join(lines[:start] + block + lines[start:])

    # ------------------------------------------------------------------
    # Section blocks
    # ------------------------------------------------------------------
    def clean_toc_blocks(self, content: str) -> Tuple[str, List[TOCBlockInfo]]:
        """Remove every paired marker block together with its surrounding blank lines.

        One blank line before a block is removed, and so is the whole run of
        blank lines after it, since insertion writes its own.
        """

        lines = split_lines(content)
        blocks = self._paired_blocks(lines)
        if not blocks:
            return content, []

        deleted = set()
        infos: List[TOCBlockInfo] = []
        for start, end in blocks:
            deleted.update(range(start, end + 1))
            if start > 0 and _is_blank(lines[start - 1]):
                deleted.add(start - 1)
            deleted.update(range(end + 1, end + 1 + blank_run(lines, end + 1)))
            infos.append(TOCBlockInfo(start_line=start, end_line=end))

        logger.debug("Removed %d TOC blocks", len(infos))
        return _join([line for index, line in enumerate(lines) if index not in deleted]), infos

    def insert_section_tocs(self, content: str, section_tocs: Sequence[SectionTOC]) -> str:
        """Insert a marker block after each level-1 heading that has TOC text."""

        targets: Dict[int, str] = {item.h1_line: item.toc for item in section_tocs if item.toc}
        if not targets:
            return content

        lines = split_lines(content)
        # the block ends with its own blank line, so the whole run after the heading goes
        skipped = set()
        for line in targets:
            skipped.update(range(line + 1, line + 1 + blank_run(lines, line + 1)))

        result: List[str] = []
        for index, line in enumerate(lines):
            if index in skipped:
                continue
            result.append(line)
            toc = targets.get(index)
            if toc:
                result.extend(["", self.marker, "", toc, "", self.marker, ""])
        return _join(result)

    def update_section_tocs(self, content: str, section_tocs: Sequence[SectionTOC]) -> str:
        """Replace existing section blocks with fresh ones.

        ``h1_line`` values refer to ``content`` as given; they are remapped
        onto the document once the old blocks are gone.
        """

        lines = split_lines(content)
        blocks = self._paired_blocks(lines)
        if not blocks:
            return self.insert_section_tocs(content, section_tocs)

        last_index = len(lines) - 1
        deleted = set()
        for start, end in blocks:
            deleted.update(range(start, end + 1))
            if end + 1 < last_index and _is_blank(lines[end + 1]):
                deleted.add(end + 1)

        kept: List[str] = []
        new_positions: Dict[int, int] = {}
        for index, line in enumerate(lines):
            if index in deleted:
                continue
            new_positions[index] = len(kept)
            kept.append(line)

        remapped = [
            SectionTOC(h1_line=new_positions[item.h1_line], toc=item.toc)
            for item in section_tocs
            if item.h1_line in new_positions
        ]
        return self.insert_section_tocs(_join(kept), remapped)


__all__ = ["MarkerHandler", "blank_run", "toc_block_line_count"]
