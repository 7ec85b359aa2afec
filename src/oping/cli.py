"""``oping`` command: parse a document and print its tree.

Usage::

    oping data.oping              # forest mode
    oping --stream data.oping     # streaming mode, one branch at a time
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .errors import OpingError
from .nodes import Branch, Leaf
from .parser import each_branch_file, parse_file

INDENT = "  "


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _fmt_value(value: str) -> str:
    """Quote a value when it would not survive re-tokenizing as-is."""
    if not value or "," in value or value != value.strip():
        return f"'{value}'"
    return value


def _fmt_leaf(leaf: Leaf) -> str:
    values = ", ".join(_fmt_value(v) for v in leaf.values)
    if leaf.values and not leaf.values[-1]:
        # a trailing empty value is only emitted before a separator
        values += ","
    return f"- {leaf.name}: {values}".rstrip()


def format_branch(branch: Branch, depth: int = 0) -> str:
    """Render *branch* and its subtree in document syntax.

    Leaves are written before child branches, since their source
    interleaving is not kept.
    """
    pad = INDENT * depth
    lines = [f"{pad}+ {branch.qualified_name}"]
    for leaf in branch.leaves:
        lines.append(f"{pad}{INDENT}{_fmt_leaf(leaf)}")
    for child in branch.branches:
        lines.append(format_branch(child, depth + 1))
    return "\n".join(lines)


def _print_branch(branch: Branch, dest: IO[str]) -> None:
    print(format_branch(branch), file=dest)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oping",
        description="Parse an oping document and print its tree.",
    )
    parser.add_argument("path", help="document to parse")
    parser.add_argument(
        "--stream",
        action="store_true",
        help="deliver top-level branches one at a time, recycling nodes",
    )
    parser.add_argument("--encoding", default="utf-8", help="file encoding (default: utf-8)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``oping`` / ``python -m oping.cli``."""
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    dest: IO[str] = sys.stdout

    try:
        if args.stream:
            each_branch_file(
                args.path,
                lambda branch: _print_branch(branch, dest),
                encoding=args.encoding,
            )
        else:
            for branch in parse_file(args.path, encoding=args.encoding):
                _print_branch(branch, dest)
    except OpingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading '{args.path}': {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
