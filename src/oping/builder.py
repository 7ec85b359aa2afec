"""Tree builder: attaches classified lines to the open branch chain.

The root's ``last_branch`` link, followed by each branch's own
``last_branch``, is the stack of currently open branches.  A node at level
*L* is attached to the branch reached after exactly *L* hops; adding a
branch replaces the previous ``last_branch`` at that depth, which closes it.
"""

from __future__ import annotations

from .classifier import ParsedLine
from .errors import StructureError
from .nodes import Branch, Leaf, Node, NodeType
from .state import ParseState
from .tokenizer import split_values


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def check_level(state: ParseState, level: int, kind: NodeType) -> None:
    """Reject levels that cannot continue the tree built so far.

    Beyond the one-level-deeper rule, this is deliberately stricter than
    descending the open branch chain alone: a node may not be deeper than
    a leaf directly before it, even when an earlier sibling branch is still
    open at that depth, and a leaf may not sit at level 0.
    """
    previous = state.previous_level

    if state.previous_kind is None and level > 0:
        raise StructureError(
            state.line_number, f"first node must not be indented (level {level})"
        )

    if state.previous_kind is NodeType.LEAF and level > previous:
        raise StructureError(
            state.line_number,
            f"level {level} after a leaf at level {previous}: leaves cannot have children",
        )

    if level > previous + 1:
        raise StructureError(
            state.line_number,
            f"indentation jumps from level {previous} to level {level}",
        )

    if kind is NodeType.LEAF and level == 0:
        raise StructureError(state.line_number, "leaf outside of any branch")


def branch_at_level(state: ParseState, level: int) -> Branch:
    """Follow ``last_branch`` from the root *level* times."""
    branch = state.root
    for depth in range(level):
        nxt = branch.last_branch
        if nxt is None:
            raise StructureError(
                state.line_number, f"no open branch at level {depth + 1}"
            )
        branch = nxt
    return branch


# ---------------------------------------------------------------------------
# Node construction
# ---------------------------------------------------------------------------

def new_branch(state: ParseState, namespace: str | None, name: str) -> Branch:
    if state.pool is not None:
        return state.pool.take_branch(namespace, name)
    return Branch(namespace, name)


def new_leaf(state: ParseState, name: str) -> Leaf:
    if state.pool is not None:
        return state.pool.take_leaf(name)
    return Leaf(name)


# ---------------------------------------------------------------------------
# Attachment
# ---------------------------------------------------------------------------

def attach(state: ParseState, level: int, parsed: ParsedLine) -> Node:
    """Validate *level*, build the node for *parsed* and attach it."""
    kind = parsed.kind
    check_level(state, level, kind)
    parent = branch_at_level(state, level)

    node: Node
    if kind is NodeType.BRANCH:
        node = new_branch(state, parsed.namespace, parsed.name)
        parent.add_branch(node)
    else:
        node = new_leaf(state, parsed.name)
        node.values.extend(split_values(parsed.raw_values))
        parent.add_leaf(node)

    state.previous_level = level
    state.previous_kind = kind
    return node
