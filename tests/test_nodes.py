"""Tests for Branch and Leaf."""

from oping.nodes import Branch, Leaf, NodeType


def test_kind_tags():
    assert Branch().kind is NodeType.BRANCH
    assert Leaf("x").kind is NodeType.LEAF

def test_qualified_name():
    assert Branch(None, "a").qualified_name == "a"
    assert Branch("ns", "a").qualified_name == "ns:a"
    assert Branch().qualified_name == ""

def test_name_is():
    assert Branch(None, "a").name_is("a")
    assert not Leaf("x").name_is("y")

def test_add_branch_sets_last_branch():
    parent = Branch(None, "p")
    first, second = Branch(None, "a"), Branch(None, "b")
    parent.add_branch(first)
    assert parent.last_branch is first
    parent.add_branch(second)
    assert parent.last_branch is second
    assert parent.branches == [first, second]

def test_leaves_and_branches_kept_apart():
    parent = Branch(None, "p")
    parent.add_leaf(Leaf("x", ["1"]))
    parent.add_branch(Branch(None, "a"))
    parent.add_leaf(Leaf("y"))
    assert [l.name for l in parent.leaves] == ["x", "y"]
    assert [b.name for b in parent.branches] == ["a"]

def test_clear_branch():
    parent = Branch(None, "p")
    parent.add_branch(Branch(None, "a"))
    parent.add_leaf(Leaf("x"))
    parent.clear()
    assert parent.branches == []
    assert parent.leaves == []
    assert parent.last_branch is None

def test_clear_leaf():
    leaf = Leaf("x", ["1", "2"])
    leaf.add_value("3")
    assert leaf.values == ["1", "2", "3"]
    leaf.clear()
    assert leaf.values == []

def test_equality_ignores_last_branch():
    a = Branch(None, "a", branches=[Branch(None, "b")])
    b = Branch(None, "a", branches=[Branch(None, "b")])
    a.last_branch = a.branches[0]
    assert a == b
