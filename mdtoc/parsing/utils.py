from __future__ import annotations

import re
from typing import Dict


_SLUG_PATTERN = re.compile(r"[^\w\- ]")


def slugify(text: str) -> str:
    """Create a GitHub-style anchor from heading text.

    Unicode letters and digits are kept so non-Latin headings still produce
    usable fragments.
    """

    slug = text.strip().lower()
    slug = _SLUG_PATTERN.sub("", slug)
    return slug.replace(" ", "-")


class AnchorRegistry:
    """Hands out unique anchors in heading-encounter order for one document."""

    def __init__(self) -> None:
        self._seen: Dict[str, int] = {}

    def assign(self, text: str) -> str:
        slug = slugify(text)
        count = self._seen.get(slug, 0)
        self._seen[slug] = count + 1
        if count:
            return f"{slug}-{count}"
        return slug


__all__ = ["AnchorRegistry", "slugify"]
