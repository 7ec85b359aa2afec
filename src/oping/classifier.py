"""Line classification: branch and leaf grammar."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Union

from .errors import GrammarError
from .nodes import NodeType
from .state import ParseState

LEAF_MARKER = "-"
BRANCH_MARKER = "+"
COMMENT_MARKER = "#"

_LEAF_RE = re.compile(r"- +([A-Za-z0-9_]+?) *: *(.*)")
_BRANCH_RE = re.compile(r"\+ +(?:([A-Za-z0-9]+):)?([A-Za-z0-9]+)$")


# ---------------------------------------------------------------------------
# Classified lines
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class BranchLine:
    kind: ClassVar[NodeType] = NodeType.BRANCH

    namespace: str | None
    name: str


@dataclass(slots=True)
class LeafLine:
    kind: ClassVar[NodeType] = NodeType.LEAF

    name: str
    raw_values: str  # verbatim text after the colon


ParsedLine = Union[BranchLine, LeafLine]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def is_comment(trimmed: str) -> bool:
    return trimmed.startswith(COMMENT_MARKER)


def classify_line(state: ParseState, trimmed: str) -> ParsedLine:
    """Classify a trimmed, non-blank, non-comment line.

    - ``+ [namespace:]name``  → BranchLine
    - ``- name: values``      → LeafLine

    Raises GrammarError when the line matches neither form.
    """
    marker = trimmed[:1]

    if marker == BRANCH_MARKER:
        m = _BRANCH_RE.match(trimmed)
        if m is None:
            raise GrammarError(state.line_number, "not a valid branch", trimmed)
        return BranchLine(namespace=m.group(1), name=m.group(2))

    if marker == LEAF_MARKER:
        m = _LEAF_RE.match(trimmed)
        if m is None:
            raise GrammarError(state.line_number, "not a valid leaf", trimmed)
        return LeafLine(name=m.group(1), raw_values=m.group(2))

    raise GrammarError(
        state.line_number,
        f"unknown node marker {marker!r}, expected '+' or '-'",
        trimmed,
    )
