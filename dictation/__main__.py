"""
Command line entry: python -m dictation merge ...

Merges transcript fragments the same way the dictation backend merges
recorded slices. Fragments come from arguments, or one per line from files
given with -f ("-" reads stdin).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from dictation.logging_setup import setup_logging
from dictation.transcript.merger import merge_transcriptions

logger = logging.getLogger(__name__)


def _read_fragments(paths: Sequence[str]) -> list[str]:
    fragments: list[str] = []
    for path in paths:
        if path == "-":
            fragments.extend(sys.stdin.read().splitlines())
            continue
        with open(path, encoding="utf-8") as f:
            fragments.extend(f.read().splitlines())
    return fragments


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dictation", description="Voice dictation transcript tools")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    merge = sub.add_parser("merge", help="Merge overlapping transcript fragments")
    merge.add_argument("fragments", nargs="*", help="Fragments in recording order")
    merge.add_argument(
        "-f",
        "--file",
        action="append",
        default=[],
        dest="files",
        help="Read fragments from file, one per line ('-' = stdin). Repeatable.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    if args.command == "merge":
        try:
            fragments = _read_fragments(args.files) + list(args.fragments)
        except OSError as e:
            logger.error("Could not read fragments: %s", e)
            return 1
        logger.debug("Merging %s fragments", len(fragments))
        print(merge_transcriptions(fragments))
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
