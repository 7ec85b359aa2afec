"""Per-session parse state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .nodes import Branch, NodeType
from .pool import NodePool


class Indentation(Enum):
    SPACES = auto()
    TABS = auto()
    NONE = auto()


@dataclass
class ParseState:
    """Everything one parse call mutates.

    A fresh state is created per call; nothing is shared between sessions.
    ``pool`` is only set in streaming mode.
    """

    root: Branch = field(default_factory=Branch)
    pool: NodePool | None = None
    line_number: int = 0

    # -- Indentation tracking -------------------------------------------
    unit_width: int | None = None
    unit_char: Indentation = Indentation.NONE
    previous_level: int = -1
    previous_kind: NodeType | None = None

    @property
    def recycling(self) -> bool:
        return self.pool is not None

    def next_line(self) -> int:
        self.line_number += 1
        return self.line_number
