"""Tests for NodePool."""

from oping.nodes import Branch, Leaf
from oping.pool import NodePool


def _tree():
    a = Branch(None, "a")
    a.add_leaf(Leaf("x", ["1", "2"]))
    b = Branch("ns", "b")
    b.add_leaf(Leaf("y", ["hi"]))
    a.add_branch(b)
    return a, b


class TestTake:
    def test_fresh_branch(self):
        pool = NodePool()
        branch = pool.take_branch("ns", "a")
        assert branch == Branch("ns", "a")
        assert pool.created == 1
        assert pool.reused == 0

    def test_fresh_leaf(self):
        pool = NodePool()
        assert pool.take_leaf("x") == Leaf("x")
        assert pool.created == 1

    def test_reuse_same_key(self):
        pool = NodePool()
        branch = pool.take_branch(None, "a")
        pool.recycle(branch)
        assert pool.take_branch(None, "a") is branch
        assert pool.created == 1
        assert pool.reused == 1

    def test_namespace_is_part_of_key(self):
        pool = NodePool()
        pool.recycle(Branch(None, "a"))
        other = pool.take_branch("ns", "a")
        assert other.namespace == "ns"
        assert pool.reused == 0
        assert len(pool) == 1

    def test_several_instances_per_key(self):
        pool = NodePool()
        first, second = Leaf("x"), Leaf("x")
        pool.recycle(first)
        pool.recycle(second)
        taken = {id(pool.take_leaf("x")), id(pool.take_leaf("x"))}
        assert taken == {id(first), id(second)}
        assert len(pool) == 0

    def test_taken_instance_is_cleared(self):
        pool = NodePool()
        leaf = Leaf("x")
        pool.recycle(leaf)
        leaf.add_value("stale")
        assert pool.take_leaf("x").values == []


class TestRecycle:
    def test_recycles_whole_subtree(self):
        pool = NodePool()
        a, b = _tree()
        x, y = a.leaves[0], b.leaves[0]
        pool.recycle(a)
        assert len(pool) == 4
        assert a.branches == [] and a.leaves == []
        assert a.last_branch is None
        assert b.leaves == []
        assert x.values == [] and y.values == []

    def test_subtree_nodes_come_back(self):
        pool = NodePool()
        a, b = _tree()
        x = a.leaves[0]
        pool.recycle(a)
        assert pool.take_branch("ns", "b") is b
        assert pool.take_leaf("x") is x
        assert pool.take_branch(None, "a") is a
        assert pool.reused == 3
