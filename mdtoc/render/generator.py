from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from mdtoc.models.configs import TOCOptions
from mdtoc.models.heading import Heading, Section

_BULLET_WIDTH = 2
_ORDERED_WIDTH = 3


class TOCGenerator:
    """Render heading sequences as nested markdown lists."""

    def __init__(self, options: TOCOptions | None = None) -> None:
        self.options = options or TOCOptions()

    def generate(self, headings: Sequence[Heading]) -> str:
        """Render one list item per heading, nested relative to the shallowest level."""

        if not headings:
            return ""

        base_level = min(heading.level for heading in headings)
        default_width = _ORDERED_WIDTH if self.options.ordered else _BULLET_WIDTH
        counters: Dict[int, int] = {}
        # column width of the open list marker at each depth
        widths: Dict[int, int] = {}
        items: List[str] = []

        for heading in headings:
            depth = heading.level - base_level
            for deeper in [level for level in counters if level > depth]:
                del counters[deeper]
                widths.pop(deeper, None)
            counters[depth] = counters.get(depth, 0) + 1

            marker = f"{counters[depth]}." if self.options.ordered else "-"
            indent = sum(widths.get(level, default_width) for level in range(depth))
            widths[depth] = len(marker) + 1
            items.append(self._render_item(heading, " " * indent + marker))

        return "\n".join(items)

    def generate_section(self, section: Section) -> str:
        """Render a section's sub-headings; the section title itself is never listed."""

        return self.generate(self._section_headings(section.sub_headers))

    def generate_sections_preview(self, sections: Iterable[Section]) -> str:
        """Concatenate every non-empty section TOC under a ``###`` title line."""

        blocks = []
        for section in sections:
            toc = self.generate_section(section)
            if toc:
                blocks.append(f"### {section.title.text}\n\n{toc}")
        return "\n\n".join(blocks)

    def _section_headings(self, headings: Iterable[Heading]) -> List[Heading]:
        min_level = max(self.options.min_level, 2)
        return [heading for heading in headings if min_level <= heading.level <= self.options.max_level]

    def _render_item(self, heading: Heading, prefix: str) -> str:
        item = f"{prefix} [{heading.text}](#{heading.anchor_link})"
        if self.options.line_number:
            item += f" `L{heading.line}-L{heading.end_line}`"
        return item


__all__ = ["TOCGenerator"]
