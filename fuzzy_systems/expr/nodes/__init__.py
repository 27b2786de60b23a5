"""
Expression tree node types.

Nodes are frozen dataclasses: immutable, structurally comparable, and
each parent owns its children outright.

Node Categories:
- Leaves: Atom, Labeled
- Operators: Not, And, Or
- Runtime choice: Alternative (with Side)

Type Hierarchy:
    Expr = Atom | Labeled | Not | And | Or | Alternative

Usage:
    a = Hamacher1.atom(0.1)
    b = Hamacher1.atom(0.6)
    c = Hamacher1.atom(0.4)

    d = (a | b) & ~c
    # same as: And(Or(a, b), Not(c))
    # same as: a.disjoin(b).conjoin(c.negate())
"""

from .base import ExprNode
from .atoms import Atom, Labeled
from .boolean import Not, And, Or
from .alternative import Side, Alternative
from .types import Expr, LEAF_TYPES

__all__ = [
    "ExprNode",
    "Atom",
    "Labeled",
    "Not",
    "And",
    "Or",
    "Side",
    "Alternative",
    "Expr",
    "LEAF_TYPES",
]
