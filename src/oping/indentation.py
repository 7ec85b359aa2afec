"""Indentation unit inference and level computation."""

from __future__ import annotations

from .errors import IndentationConsistencyError
from .state import Indentation, ParseState

SPACE = " "
TAB = "\t"

_UNIT_CHARS = {SPACE: Indentation.SPACES, TAB: Indentation.TABS}


def leading_whitespace(raw_line: str) -> str:
    """Return the maximal run of spaces and tabs that starts *raw_line*."""
    return raw_line[: len(raw_line) - len(raw_line.lstrip(SPACE + TAB))]


def indentation_level(state: ParseState, raw_line: str) -> int:
    """Compute the level of *raw_line*, inferring the unit on first use.

    The first indented line fixes both the unit character and the unit
    width (its run of that character) and is level 1.  Every later line
    must be indented with that character only, in whole units.
    """
    leading = leading_whitespace(raw_line)
    if not leading:
        return 0

    if state.unit_width is None:
        char = leading[0]
        width = len(leading) - len(leading.lstrip(char))
        if width != len(leading):
            raise IndentationConsistencyError(
                state.line_number,
                "mixed spaces and tabs in indentation",
                raw_line,
            )
        state.unit_width = width
        state.unit_char = _UNIT_CHARS[char]
        return 1

    if any(_UNIT_CHARS[c] is not state.unit_char for c in leading):
        expected = "spaces" if state.unit_char is Indentation.SPACES else "tabs"
        raise IndentationConsistencyError(
            state.line_number,
            f"indentation must use {expected} only",
            raw_line,
        )

    if len(leading) % state.unit_width:
        raise IndentationConsistencyError(
            state.line_number,
            f"indentation of {len(leading)} is not a multiple of {state.unit_width}",
            raw_line,
        )

    return len(leading) // state.unit_width
