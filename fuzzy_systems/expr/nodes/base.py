"""
ExprNode: the shared surface of every expression node.

Nodes are frozen dataclasses defined in sibling modules; this mixin gives
them the combinator methods and Python operators. Python's own operator
precedence (~ over & over |) already matches fuzzy precedence, so
`a | b & ~c` builds Or(a, And(b, Not(c))).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...opset.base import Opset
    from ...value.membership import Membership
    from .alternative import Alternative
    from .boolean import And, Not, Or


class ExprNode:
    """
    Mixin for expression nodes.

    Every node belongs to exactly one operation set (`opset`). Nodes are
    immutable; each combinator returns a new node owning its operands.
    """

    __slots__ = ()

    @property
    def opset(self) -> type["Opset"]:
        """Operation set this node evaluates under."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Evaluation / rendering
    # -------------------------------------------------------------------------

    def evaluate(self) -> "Membership":
        """Evaluate the tree. Recomputed on every call."""
        from ..evaluation import evaluate_expression

        return evaluate_expression(self)

    def render(self) -> str:
        """Fully parenthesized text form."""
        from ..render import render_expression

        return render_expression(self)

    def __str__(self) -> str:
        return self.render()

    # -------------------------------------------------------------------------
    # Combinators
    # -------------------------------------------------------------------------

    def negate(self) -> "Not":
        from ..combinators import negate

        return negate(self)

    def conjoin(self, other: "ExprNode") -> "And":
        from ..combinators import conjoin

        return conjoin(self, other)

    def disjoin(self, other: "ExprNode") -> "Or":
        from ..combinators import disjoin

        return disjoin(self, other)

    def as_left(self) -> "Alternative":
        """Wrap as the left arm of an Alternative."""
        from ..combinators import as_left

        return as_left(self)

    def as_right(self) -> "Alternative":
        """Wrap as the right arm of an Alternative."""
        from ..combinators import as_right

        return as_right(self)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __invert__(self) -> "Not":
        return self.negate()

    def __and__(self, other: object) -> "And":
        if not isinstance(other, ExprNode):
            return NotImplemented
        return self.conjoin(other)

    def __or__(self, other: object) -> "Or":
        if not isinstance(other, ExprNode):
            return NotImplemented
        return self.disjoin(other)

    def __bool__(self) -> bool:
        raise TypeError(
            f"{type(self).__name__} has no truth value; "
            "use &, |, ~ (or conjoin/disjoin/negate) instead of and/or/not"
        )


__all__ = ["ExprNode"]
