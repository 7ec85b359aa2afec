"""Error types raised while parsing an oping document."""

from __future__ import annotations


class OpingError(Exception):
    """Base error: a document could not be parsed.

    ``line_number`` counts meaningful (non-blank) lines, 1-based, comments
    included.  ``line`` is the offending source text when known.
    """

    def __init__(self, line_number: int, reason: str, line: str | None = None) -> None:
        super().__init__(f"line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason
        self.line = line


class GrammarError(OpingError):
    """A line matches neither the branch nor the leaf grammar."""


class StructureError(OpingError):
    """An indentation level implies an invalid tree edit."""


class IndentationConsistencyError(OpingError):
    """Leading whitespace does not agree with the inferred indentation unit."""
