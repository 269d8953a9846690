from __future__ import annotations

from typing import Iterable, List

from mdtoc.models.heading import Heading, Section


def split_sections(headings: Iterable[Heading]) -> List[Section]:
    """Group a flat heading list under its level-1 headings.

    Headings that appear before the first level-1 heading belong to no
    section and are dropped.
    """

    sections: List[Section] = []
    for heading in headings:
        if heading.level == 1:
            sections.append(Section(title=heading))
        elif sections:
            sections[-1].sub_headers.append(heading)
    return sections


__all__ = ["split_sections"]
