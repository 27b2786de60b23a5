"""
Expression Renderer.

Produces the canonical, fully parenthesized text of an expression tree:

    Atom(v)          -> v as canonical numeric text ("0.1", "1")
    Labeled(_, tag)  -> str(tag); the numeric value is not shown
    Not(x)           -> "!" + x
    And(l, r)        -> "(" + l + " & " + r + ")"
    Or(l, r)         -> "(" + l + " | " + r + ")"
    Alternative      -> the populated arm

Every binary node is parenthesized, so the output depends only on tree
shape and leaf contents and never needs precedence to read back.
"""

from __future__ import annotations

from ..value.formatting import format_raw
from .nodes import Alternative, And, Atom, Expr, Labeled, Not, Or

NOT_SYMBOL = "!"
AND_SYMBOL = "&"
OR_SYMBOL = "|"


class ExprRenderer:
    """
    Renders expression trees to canonical text.

    Stateless - independent of evaluation and of the operation set.
    """

    def render(self, expr: Expr) -> str:
        """
        Render an expression tree.

        Args:
            expr: The expression to render.

        Returns:
            Fully parenthesized text.
        """
        if isinstance(expr, Atom):
            return format_raw(expr.value.raw)
        elif isinstance(expr, Labeled):
            return str(expr.label)
        elif isinstance(expr, Not):
            return f"{NOT_SYMBOL}{self.render(expr.child)}"
        elif isinstance(expr, And):
            return f"({self.render(expr.left)} {AND_SYMBOL} {self.render(expr.right)})"
        elif isinstance(expr, Or):
            return f"({self.render(expr.left)} {OR_SYMBOL} {self.render(expr.right)})"
        elif isinstance(expr, Alternative):
            return self.render(expr.branch)
        else:
            raise TypeError(f"Unknown expression type: {type(expr).__name__}")


_RENDERER = ExprRenderer()


def render_expression(expr: Expr) -> str:
    """Convenience function to render an expression."""
    return _RENDERER.render(expr)


__all__ = [
    "ExprRenderer",
    "render_expression",
    "NOT_SYMBOL",
    "AND_SYMBOL",
    "OR_SYMBOL",
]
