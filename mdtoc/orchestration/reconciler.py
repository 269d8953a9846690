from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Sequence

from mdtoc.markers.handler import blank_run, toc_block_line_count
from mdtoc.models.configs import TOCOptions
from mdtoc.models.heading import Section
from mdtoc.models.marker import SectionTOC
from mdtoc.parsing.markdown import HeadingParser
from mdtoc.render.generator import TOCGenerator


def block_growth(lines: Sequence[str], h1_line: int, toc: str) -> int:
    """Lines a section block adds after the heading at 0-based ``h1_line``.

    The insertion absorbs the run of blank lines directly after the heading,
    which takes that many lines off the block's own size.
    """

    if not toc:
        return 0
    return toc_block_line_count(toc) - blank_run(lines, h1_line + 1)


def plan_section_tocs(
    sections: Sequence[Section],
    clean_lines: Sequence[str],
    options: TOCOptions,
) -> List[SectionTOC]:
    """Render section TOCs whose line numbers hold after every block is inserted.

    ``sections`` must come from ``clean_lines`` (a document without TOC
    blocks). Each block is measured with line numbers off, then the
    sub-headings are shifted by the lines added by all earlier blocks plus
    the current one before the final render.
    """

    measure = TOCGenerator(options.model_copy(update={"line_number": False}))
    render = TOCGenerator(options)

    planned: List[SectionTOC] = []
    offset = 0
    for section in sections:
        draft = measure.generate_section(section)
        if not draft:
            continue

        h1_line = section.title.line - 1
        growth = block_growth(clean_lines, h1_line, draft)
        shifted = replace(
            section,
            sub_headers=[heading.shifted(offset + growth) for heading in section.sub_headers],
        )
        planned.append(SectionTOC(h1_line=h1_line, toc=render.generate_section(shifted)))
        offset += growth

    return planned


def plan_document_toc(
    text: str,
    place: Callable[[str, str], str],
    options: TOCOptions,
) -> str:
    """Render the document TOC against the layout ``place`` gives ``text``.

    A draft without line numbers is placed first, since line-number suffixes
    never change how many lines the TOC takes. Headings are then read back
    from the placed draft, so their lines already include the marker block and
    anything the placement removed. When the removal changed the heading list
    the draft is placed once more with the settled list.
    """

    parser = HeadingParser(options)
    measure = TOCGenerator(options.model_copy(update={"line_number": False}))

    draft = measure.generate(parser.parse(text))
    headings = parser.parse(place(text, draft))
    settled = measure.generate(headings)
    if settled != draft:
        headings = parser.parse(place(text, settled))
    return TOCGenerator(options).generate(headings)


__all__ = ["block_growth", "plan_document_toc", "plan_section_tocs"]
