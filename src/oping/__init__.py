"""Oping: parser for an indentation-based tree of branches and leaves."""

from .nodes import Branch, Leaf, Node, NodeType
from .errors import (
    GrammarError,
    IndentationConsistencyError,
    OpingError,
    StructureError,
)
from .pool import NodePool
from .state import ParseState
from .tokenizer import split_values
from .parser import (
    each_branch_file,
    each_branch_text,
    parse_each,
    parse_file,
    parse_forest,
    parse_text,
)

__all__ = [
    "parse_forest",
    "parse_each",
    "parse_text",
    "parse_file",
    "each_branch_text",
    "each_branch_file",
    "split_values",
    "Branch",
    "Leaf",
    "Node",
    "NodeType",
    "NodePool",
    "ParseState",
    "OpingError",
    "GrammarError",
    "StructureError",
    "IndentationConsistencyError",
]
