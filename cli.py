#!/usr/bin/env python3
"""CLI for parsing backtraces into stack frames."""

import argparse
import json
import logging
import sys
from pathlib import Path

from stackframes import UnknownFamilyError, family_by_name, parse_lines
from stackframes import config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Backtrace Parsing Tool")
    parser.add_argument("--file", "-f", help="File containing the backtrace, one frame per line")
    parser.add_argument("--line", "-l", action="append", help="Backtrace line (repeatable)")
    parser.add_argument(
        "--family", default="native",
        help="Pattern family: native, managed_vm, database_driver, script_bridge"
    )
    parser.add_argument("--json", action="store_true", help="Print frames as JSON")
    return parser


def format_frame(frame) -> str:
    location = frame.file or "?"
    if frame.line is not None:
        location = f"{location}:{frame.line}"
    if frame.function:
        return f"{location} in {frame.function}"
    return location


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        family = family_by_name(args.family)
    except UnknownFamilyError:
        print(f"Unknown family: {args.family}", file=sys.stderr)
        sys.exit(1)

    # Get backtrace lines
    if args.file:
        try:
            text = Path(args.file).read_text()
        except OSError as e:
            print(f"Cannot read {args.file}: {e}", file=sys.stderr)
            sys.exit(1)
        lines = text.splitlines()
    elif args.line:
        lines = args.line
    else:
        lines = sys.stdin.read().splitlines()

    frames = parse_lines(lines, family)

    if args.json:
        print(json.dumps([f.to_dict() for f in frames], indent=2))
        return

    for frame in frames:
        print(format_frame(frame))


if __name__ == "__main__":
    main()
