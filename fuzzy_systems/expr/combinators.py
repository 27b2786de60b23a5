"""
Combinators: the construction surface for expression trees.

Each function returns a new immutable node and never mutates its
operands. The precedence compiler rewrites infix text into calls to
these same functions, so a compiled expression and a hand-built one are
structurally equal.

    atom(0.1, Hamacher1)               # Atom
    negate(x)                          # !x
    conjoin(x, y)                      # (x & y)
    disjoin(x, y)                      # (x | y)
    as_left(x) / as_right(y)           # Alternative
    attach_label(atom(0.1, H), "a")    # Labeled, renders "a"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .nodes import Alternative, And, Atom, ExprNode, Labeled, Not, Or, Side
from ..value.membership import Membership

if TYPE_CHECKING:
    from ..opset.base import Opset


def atom(raw: float, opset: type["Opset"]) -> Atom:
    """Leaf from a raw degree; raises OutOfRangeError outside [0, 1]."""
    return Atom(Membership(raw, opset))


def from_membership(value: Membership) -> Atom:
    """Leaf from an existing membership."""
    return Atom(value)


def negate(node: ExprNode) -> Not:
    """!node"""
    return Not(node)


def conjoin(left: ExprNode, right: ExprNode) -> And:
    """(left & right)"""
    return And(left, right)


def disjoin(left: ExprNode, right: ExprNode) -> Or:
    """(left | right)"""
    return Or(left, right)


def as_alternative(node: ExprNode, side: Side) -> Alternative:
    """Wrap node in the given arm of an Alternative."""
    return Alternative(side, node)


def as_left(node: ExprNode) -> Alternative:
    return Alternative(Side.LEFT, node)


def as_right(node: ExprNode) -> Alternative:
    return Alternative(Side.RIGHT, node)


def attach_label(node: Atom, label: Any) -> Labeled:
    """
    Turn an atom into a labeled leaf.

    Only plain atoms can be labeled; operator nodes have no single value
    to stand for.

    Raises:
        TypeError: If node is not an Atom
    """
    if not isinstance(node, Atom):
        raise TypeError(
            f"attach_label: only Atom nodes can be labeled, got {type(node).__name__}"
        )
    return Labeled(node.value, label)


__all__ = [
    "atom",
    "from_membership",
    "negate",
    "conjoin",
    "disjoin",
    "as_alternative",
    "as_left",
    "as_right",
    "attach_label",
]
