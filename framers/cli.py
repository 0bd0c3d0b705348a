"""Command-line interface for the framers calculator."""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from .config import Settings
from .history import HistoryStore
from .project import FramersConfig, FramersProject


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a plain-language framing request into a material takeoff",
        epilog='Example: framers "I need studs for a 40 foot wall, 9 feet high, 3 windows and a door"',
    )
    parser.add_argument("query", nargs="*", help="What you are framing, in your own words")
    parser.add_argument("--csv", dest="output", help="Path to write the estimate as CSV")
    parser.add_argument("--json", action="store_true", help="Print the full interpretation as JSON")
    parser.add_argument("--history", help="History file (default: $FRAMERS_HISTORY_PATH or ~/.framers/history.json)")
    parser.add_argument("--no-history", action="store_true", help="Do not record this query")
    parser.add_argument("--list-history", action="store_true", help="Show recent queries and exit")
    parser.add_argument("--clear-history", action="store_true", help="Delete recorded queries and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    history_path = pathlib.Path(args.history).expanduser() if args.history else settings.history_path
    store = HistoryStore(history_path, limit=settings.history_limit)

    if args.clear_history:
        store.clear()
        print("History cleared.")
        return 0

    if args.list_history:
        entries = store.load()
        if not entries:
            print("No calculations yet.")
        for entry in entries:
            print(f"{entry.time}  {entry.highlight:<24} {entry.title}  \"{entry.query}\"")
        return 0

    config = FramersConfig(
        query=" ".join(args.query),
        output_path=pathlib.Path(args.output).expanduser().resolve() if args.output else None,
        as_json=args.json,
    )
    project = FramersProject(config, history=None if args.no_history else store)

    run = project.run()
    if run.blank:
        parser.print_usage(sys.stderr)
        print(f"error: {run.result.note}", file=sys.stderr)
        return 1

    return 1 if run.result.error else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
