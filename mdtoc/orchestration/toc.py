from __future__ import annotations

import logging
from typing import List

from mdtoc.markers.handler import MarkerHandler
from mdtoc.models.configs import TOCOptions
from mdtoc.models.marker import SectionTOC
from mdtoc.orchestration.reconciler import plan_document_toc, plan_section_tocs
from mdtoc.parsing.markdown import HeadingParser, split_lines
from mdtoc.parsing.sections import split_sections
from mdtoc.render.generator import TOCGenerator

logger = logging.getLogger(__name__)

Content = bytes | str


def _as_text(content: Content) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8")
    return content


class TOC:
    """Generate and maintain the table of contents of one markdown document.

    Every method is a pure function of the content passed in; reading and
    writing files is left to the caller.
    """

    def __init__(self, options: TOCOptions | None = None) -> None:
        self.options = options or TOCOptions()
        self.parser = HeadingParser(self.options)
        self.generator = TOCGenerator(self.options)
        self.marker = MarkerHandler(self.options.marker)

    def generate_from_content(self, content: Content) -> str:
        """Render the TOC for every heading within the level range."""

        return self.generator.generate(self.parser.parse(_as_text(content)))

    def generate_section_tocs(self, content: Content) -> List[SectionTOC]:
        """Per-section TOCs positioned against ``content`` as given, without line shifting."""

        sections = split_sections(self.parser.parse_all_headers(_as_text(content)))
        section_tocs = []
        for section in sections:
            toc = self.generator.generate_section(section)
            if toc:
                section_tocs.append(SectionTOC(h1_line=section.title.line - 1, toc=toc))
        return section_tocs

    def generate_section_tocs_with_offset(self, clean_content: Content) -> List[SectionTOC]:
        """Per-section TOCs whose line numbers match the document after insertion."""

        text = _as_text(clean_content)
        sections = split_sections(self.parser.parse_all_headers(text))
        return plan_section_tocs(sections, split_lines(text), self.options)

    def generate_section_tocs_preview(self, content: Content) -> str:
        sections = split_sections(self.parser.parse_all_headers(_as_text(content)))
        return self.generator.generate_sections_preview(sections)

    def generate_preview(self, content: Content) -> str:
        """Standalone TOC text for the configured mode."""

        if self.options.section_toc:
            return self.generate_section_tocs_preview(content)
        return self.generate_from_content(content)

    def update_text(self, text: str) -> str:
        if self.options.section_toc:
            clean, removed = self.marker.clean_toc_blocks(text)
            logger.debug("Section mode: cleared %d existing TOC blocks", len(removed))
            section_tocs = self.generate_section_tocs_with_offset(clean)
            return self.marker.insert_section_tocs(clean, section_tocs)

        # an existing marker region is repaired in place, otherwise a block is created
        place = self.marker.insert_toc_after_first_heading
        return place(text, plan_document_toc(text, place, self.options))

    def update_content(self, content: Content) -> bytes:
        """Return the full document with its TOC region(s) regenerated."""

        return self.update_text(_as_text(content)).encode("utf-8")

    def check_diff(self, content: Content) -> bool:
        """True when regenerating the TOC would change the document."""

        text = _as_text(content)
        return self.update_text(text) != text

    def has_marker(self, content: Content) -> bool:
        return self.marker.find_markers(_as_text(content)).found


__all__ = ["TOC"]
