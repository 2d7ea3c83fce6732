"""Main CLI entry point for structvalue."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..exceptions import StructValueError
from ..messages.value import Value
from .tree import render_tree


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    file_path = Path(source)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return file_path.read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the structvalue CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="structvalue: JSON-equivalent tagged-union values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  structvalue --inspect document.json     Show the Value kinds of a document
  structvalue --roundtrip document.json   Print the document's JSON wire form
  cat document.json | structvalue --inspect -
  structvalue --version                   Show version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="Encode a JSON document and print its Value tree ('-' for stdin)",
    )
    group.add_argument(
        "--roundtrip",
        metavar="FILE",
        type=str,
        help="Encode a JSON document and print the Value's JSON wire form",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="structvalue 0.1.0",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    source = args.inspect or args.roundtrip
    if source is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    try:
        value = Value.from_json(_read_source(source))
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except StructValueError as e:
        print(f"Error converting document: {e}", file=sys.stderr)
        return 1

    if args.inspect:
        print(render_tree(value))
    else:
        print(value.to_json().decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
