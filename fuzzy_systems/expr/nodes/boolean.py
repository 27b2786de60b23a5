"""
Operator nodes: Not, And, Or.

Both operands of And/Or must belong to the same operation set; the check
runs when the node is built, so a mixed tree can never be evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...errors import OpsetMismatchError
from .base import ExprNode

if TYPE_CHECKING:
    from ...opset.base import Opset


def _require_node(node: str, operand: str, value: object) -> None:
    if not isinstance(value, ExprNode):
        raise TypeError(
            f"{node}: {operand} must be an expression node, got {type(value).__name__}. "
            "Wrap plain values with .to_expr() or Opset.atom()."
        )


def _require_same_opset(node: str, left: ExprNode, right: ExprNode) -> None:
    if left.opset is not right.opset:
        raise OpsetMismatchError(node, left.opset, right.opset)


@dataclass(frozen=True, repr=False)
class Not(ExprNode):
    """
    Negation of the child expression.

    Attributes:
        child: The expression to negate

    Examples:
        Not(a)  # !a
    """
    child: ExprNode

    def __post_init__(self):
        _require_node("Not", "child", self.child)

    @property
    def opset(self) -> type["Opset"]:
        return self.child.opset

    def __repr__(self) -> str:
        return f"Not({self.child!r})"


@dataclass(frozen=True, repr=False)
class And(ExprNode):
    """
    Conjunction of two expressions.

    Both operands are always evaluated; the result is a numeric function
    of both, so there is no short-circuit.

    Attributes:
        left: Left operand
        right: Right operand

    Examples:
        And(a, b)  # (a & b)
    """
    left: ExprNode
    right: ExprNode

    def __post_init__(self):
        _require_node("And", "left", self.left)
        _require_node("And", "right", self.right)
        _require_same_opset("And", self.left, self.right)

    @property
    def opset(self) -> type["Opset"]:
        return self.left.opset

    def __repr__(self) -> str:
        return f"And({self.left!r}, {self.right!r})"


@dataclass(frozen=True, repr=False)
class Or(ExprNode):
    """
    Disjunction of two expressions.

    Attributes:
        left: Left operand
        right: Right operand

    Examples:
        Or(a, b)  # (a | b)
    """
    left: ExprNode
    right: ExprNode

    def __post_init__(self):
        _require_node("Or", "left", self.left)
        _require_node("Or", "right", self.right)
        _require_same_opset("Or", self.left, self.right)

    @property
    def opset(self) -> type["Opset"]:
        return self.left.opset

    def __repr__(self) -> str:
        return f"Or({self.left!r}, {self.right!r})"


__all__ = [
    "Not",
    "And",
    "Or",
]
