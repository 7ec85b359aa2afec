"""Parse driver: forest mode and streaming mode."""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterable

from .builder import attach
from .classifier import classify_line, is_comment
from .indentation import indentation_level
from .nodes import Branch, Node
from .pool import NodePool
from .state import ParseState

logger = logging.getLogger(__name__)

BranchCallback = Callable[[Branch], None]


# ---------------------------------------------------------------------------
# Per-line processing
# ---------------------------------------------------------------------------

def process_line(state: ParseState, raw_line: str) -> Node | None:
    """Process one source line and return the node it produced, if any.

    Blank lines are skipped without being counted; comment lines are
    counted but otherwise ignored.  Neither affects indentation inference.
    """
    line = raw_line.rstrip("\r\n")
    trimmed = line.strip(" \t")
    if not trimmed:
        return None

    state.next_line()
    if is_comment(trimmed):
        return None

    level = indentation_level(state, line)
    parsed = classify_line(state, trimmed)
    return attach(state, level, parsed)


# ---------------------------------------------------------------------------
# Forest mode
# ---------------------------------------------------------------------------

def parse_forest(lines: Iterable[str]) -> list[Branch]:
    """Parse *lines* and return the list of top-level branches."""
    state = ParseState()
    for raw_line in lines:
        process_line(state, raw_line)

    forest = state.root.branches
    logger.debug(
        "parsed %d top-level branches from %d lines", len(forest), state.line_number
    )
    return forest


# ---------------------------------------------------------------------------
# Streaming mode
# ---------------------------------------------------------------------------

def parse_each(lines: Iterable[str], on_branch: BranchCallback) -> int:
    """Deliver each completed top-level branch to *on_branch*.

    As soon as a new top-level branch starts, the previous one is passed to
    *on_branch* and then recycled: its nodes are cleared and reused for the
    branches that follow.  The callback must copy whatever it needs before
    returning; references kept afterwards observe reused state.  The last
    branch is delivered once input is exhausted and is not recycled.

    Returns the number of branches delivered.
    """
    pool = NodePool()
    state = ParseState(pool=pool)
    root = state.root
    delivered = 0

    for raw_line in lines:
        current = root.last_branch
        process_line(state, raw_line)
        if current is not None and root.last_branch is not current:
            on_branch(current)
            delivered += 1
            logger.debug("delivered branch %r", current.qualified_name)
            pool.recycle(current)
            del root.branches[:-1]

    if root.last_branch is not None:
        on_branch(root.last_branch)
        delivered += 1

    logger.debug(
        "streamed %d top-level branches (%d nodes created, %d reused)",
        delivered,
        pool.created,
        pool.reused,
    )
    return delivered


# ---------------------------------------------------------------------------
# Line sources
# ---------------------------------------------------------------------------

def parse_text(text: str) -> list[Branch]:
    return parse_forest(text.split("\n"))


def each_branch_text(text: str, on_branch: BranchCallback) -> int:
    return parse_each(text.split("\n"), on_branch)


def parse_file(path: str | os.PathLike[str], encoding: str = "utf-8") -> list[Branch]:
    """Parse the file at *path* in forest mode."""
    with open(path, encoding=encoding) as fh:
        return parse_forest(fh)


def each_branch_file(
    path: str | os.PathLike[str],
    on_branch: BranchCallback,
    encoding: str = "utf-8",
) -> int:
    """Stream the file at *path*, delivering each top-level branch."""
    with open(path, encoding=encoding) as fh:
        return parse_each(fh, on_branch)
