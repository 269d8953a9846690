"""TOC generation flows built on the parsing, rendering and marker layers."""

from .config_loader import load_options, resolve_options
from .reconciler import block_growth, plan_document_toc, plan_section_tocs
from .runner import RunResult, run_toc
from .toc import TOC

__all__ = [
    "RunResult",
    "TOC",
    "block_growth",
    "load_options",
    "plan_document_toc",
    "plan_section_tocs",
    "resolve_options",
    "run_toc",
]
