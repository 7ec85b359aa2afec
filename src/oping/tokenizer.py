"""Leaf value tokenizer."""

from __future__ import annotations

QUOTE = "'"
SEPARATOR = ","
_BLANKS = frozenset(" \t")


def split_values(text: str) -> list[str]:
    """Split the raw text after a leaf's colon into value tokens.

    A single quote toggles quoting and is never part of a token; inside
    quotes every character is kept.  Outside quotes a comma ends the
    current token (empty tokens included) and blanks are skipped until the
    token has content.  A trailing empty token is not emitted::

        "a, b, 'c,d', ,e"  →  ["a", "b", "c,d", "", "e"]
        "a,b,"             →  ["a", "b"]
    """
    values: list[str] = []
    current: list[str] = []
    quoted = False

    for ch in text:
        if ch == QUOTE:
            quoted = not quoted
        elif quoted:
            current.append(ch)
        elif ch == SEPARATOR:
            values.append("".join(current))
            current = []
        elif current or ch not in _BLANKS:
            current.append(ch)

    if current:
        values.append("".join(current))

    return values
