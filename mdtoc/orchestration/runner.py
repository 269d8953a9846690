from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from mdtoc.models.configs import TOCOptions
from mdtoc.orchestration.toc import TOC

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    """Outcome of processing one markdown file."""

    path: Path
    changed: bool
    written: bool = False
    output: str = ""


def run_toc(
    path: Path,
    options: TOCOptions,
    *,
    in_place: bool = False,
    diff: bool = False,
) -> RunResult:
    """Read ``path`` once, apply the requested mode and write back at most once.

    ``diff`` only reports whether an update is pending, ``in_place`` rewrites
    the file, and otherwise the rendered TOC is returned for printing.
    """

    if not path.exists():
        raise FileNotFoundError(f"Markdown file not found: {path}")

    content = path.read_bytes()
    toc = TOC(options)
    validation = toc.marker.validate_markers(content.decode("utf-8"))
    if not validation.valid:
        logger.warning("%s: %s", path, validation.message)

    if diff:
        changed = toc.check_diff(content)
        logger.info("%s: TOC %s", path, "is out of date" if changed else "is up to date")
        return RunResult(path=path, changed=changed)

    if in_place:
        updated = toc.update_content(content)
        changed = updated != content
        if changed:
            path.write_bytes(updated)
            logger.info("%s: TOC updated", path)
        else:
            logger.debug("%s: TOC already current", path)
        return RunResult(path=path, changed=changed, written=changed)

    return RunResult(path=path, changed=False, output=toc.generate_preview(content))


__all__ = ["RunResult", "run_toc"]
