"""Keyed pool of recycled branches and leaves (streaming mode)."""

from __future__ import annotations

import logging
from collections import defaultdict

from .nodes import Branch, Leaf, Node, NodeType

logger = logging.getLogger(__name__)

BranchKey = tuple[str | None, str | None]


class NodePool:
    """Reuses cleared nodes keyed by identity.

    Branches are keyed by ``(namespace, name)``, leaves by ``name``.  The
    pool is unbounded; a document usually repeats a small set of shapes.

    Usage::

        pool = NodePool()
        a = pool.take_branch(None, "a")   # fresh
        pool.recycle(a)
        pool.take_branch(None, "a") is a  # → True
    """

    def __init__(self) -> None:
        self._branches: defaultdict[BranchKey, list[Branch]] = defaultdict(list)
        self._leaves: defaultdict[str, list[Leaf]] = defaultdict(list)
        self.created = 0
        self.reused = 0

    def __len__(self) -> int:
        return sum(len(v) for v in self._branches.values()) + sum(
            len(v) for v in self._leaves.values()
        )

    # -- Taking ----------------------------------------------------------

    def take_branch(self, namespace: str | None, name: str | None) -> Branch:
        idle = self._branches.get((namespace, name))
        if idle:
            branch = idle.pop()
            branch.clear()
            self.reused += 1
            logger.debug("reusing branch %r", branch.qualified_name)
            return branch
        self.created += 1
        return Branch(namespace, name)

    def take_leaf(self, name: str) -> Leaf:
        idle = self._leaves.get(name)
        if idle:
            leaf = idle.pop()
            leaf.clear()
            self.reused += 1
            return leaf
        self.created += 1
        return Leaf(name)

    # -- Recycling -------------------------------------------------------

    def recycle(self, node: Node) -> None:
        """Clear *node* and its whole subtree and keep them for reuse."""
        if node.kind is NodeType.LEAF:
            node.clear()
            self._leaves[node.name].append(node)
            return

        for child in node.branches:
            self.recycle(child)
        for leaf in node.leaves:
            self.recycle(leaf)
        node.clear()
        self._branches[(node.namespace, node.name)].append(node)
