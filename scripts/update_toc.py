from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from mdtoc.orchestration import RunResult, resolve_options, run_toc
from mdtoc.settings import get_settings


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate or refresh the table of contents of Markdown files.")
    parser.add_argument("files", type=Path, nargs="+", help="Markdown files to process")
    parser.add_argument("--min-level", type=int, default=None, help="Shallowest heading level to include (1-6)")
    parser.add_argument("--max-level", type=int, default=None, help="Deepest heading level to include (1-6)")
    parser.add_argument("--ordered", action="store_true", default=None, help="Render a numbered list")
    parser.add_argument(
        "--line-number",
        action="store_true",
        default=None,
        help="Append the source line range of each heading to its entry",
    )
    parser.add_argument(
        "--section",
        dest="section_toc",
        action="store_true",
        default=None,
        help="Write one TOC after every level-1 heading covering only its sub-headings",
    )
    parser.add_argument("--marker", default=None, help="Marker line delimiting the TOC (default: <!--TOC-->)")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML, TOML or JSON file with option defaults",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-i", "--in-place", action="store_true", help="Rewrite the files in place")
    mode.add_argument(
        "-d",
        "--diff",
        action="store_true",
        help="Exit with status 1 when a file's TOC is out of date; never writes",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)

    overrides = {
        "min_level": args.min_level,
        "max_level": args.max_level,
        "ordered": args.ordered,
        "line_number": args.line_number,
        "section_toc": args.section_toc,
        "marker": args.marker,
    }
    try:
        settings = get_settings()
        options = resolve_options(settings, args.config, overrides)
    except (FileNotFoundError, ValueError) as exc:
        # pydantic's ValidationError is a ValueError
        print(f"Invalid options: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    results: List[RunResult] = []
    for path in args.files:
        try:
            result = run_toc(path, options, in_place=args.in_place, diff=args.diff)
        except FileNotFoundError as exc:
            print(exc, file=sys.stderr)
            return 2
        results.append(result)
        if result.output:
            print(result.output)

    if args.diff:
        stale = [str(result.path) for result in results if result.changed]
        for path in stale:
            print(f"TOC out of date: {path}", file=sys.stderr)
        return 1 if stale else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
