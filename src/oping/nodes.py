"""Tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Union


# ---------------------------------------------------------------------------
# NodeType
# ---------------------------------------------------------------------------

class NodeType(Enum):
    BRANCH = auto()   # +
    LEAF = auto()     # -


# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Leaf:
    """A named terminal node holding an ordered list of string values."""

    kind: ClassVar[NodeType] = NodeType.LEAF

    name: str
    values: list[str] = field(default_factory=list)

    def name_is(self, name: str) -> bool:
        return self.name == name

    def add_value(self, value: str) -> None:
        self.values.append(value)

    def clear(self) -> None:
        self.values.clear()


# ---------------------------------------------------------------------------
# Branch
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Branch:
    """A named, optionally namespaced, interior node.

    Child branches and child leaves are kept in two separate lists, so the
    order in which branches and leaves were interleaved in the source is not
    recorded.

    ``last_branch`` points at the most recently added child branch.  It is
    a navigation aid for the tree builder (the chain of ``last_branch``
    links from the root is the stack of currently open branches), not a
    second owner, so it takes no part in equality or repr.
    """

    kind: ClassVar[NodeType] = NodeType.BRANCH

    namespace: str | None = None
    name: str | None = None
    branches: list[Branch] = field(default_factory=list)
    leaves: list[Leaf] = field(default_factory=list)
    last_branch: Branch | None = field(default=None, repr=False, compare=False)

    @property
    def qualified_name(self) -> str:
        if self.namespace is None:
            return self.name or ""
        return f"{self.namespace}:{self.name}"

    def name_is(self, name: str) -> bool:
        return self.name == name

    def add_branch(self, branch: Branch) -> None:
        self.branches.append(branch)
        self.last_branch = branch

    def add_leaf(self, leaf: Leaf) -> None:
        self.leaves.append(leaf)

    def clear(self) -> None:
        """Drop all children.  Children themselves are left untouched."""
        self.branches.clear()
        self.leaves.clear()
        self.last_branch = None


Node = Union[Branch, Leaf]
