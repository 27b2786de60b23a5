"""
Expression Evaluator.

Walks an expression tree and produces its Membership under the tree's
operation set.

Key Features:
- Post-order recursion, both operands of And/Or always evaluated
- Leaves (Atom, Labeled) yield their stored value; labels are ignored
- Alternative delegates to its populated arm
- No caching: evaluating twice computes twice

Usage:
    evaluator = ExprEvaluator()
    value = evaluator.evaluate(expr)   # Membership
"""

from __future__ import annotations

from ...value.membership import Membership
from ..nodes import Alternative, And, Atom, Expr, Labeled, Not, Or
from .boolean_ops import eval_and, eval_not, eval_or


class ExprEvaluator:
    """
    Evaluates expression trees.

    Stateless - can be reused across evaluations and shared between threads.

    Example:
        a = Hamacher1.atom(0.1)
        b = Hamacher1.atom(0.6)
        c = Hamacher1.atom(0.4)
        ExprEvaluator().evaluate((a | b) & ~c)   # Membership(0.384, Hamacher1)
    """

    def evaluate(self, expr: Expr) -> Membership:
        """
        Evaluate an expression tree.

        Cannot fail for a tree of well-formed nodes and a conforming
        operation set: leaves hold validated memberships and the operation
        set keeps results in range.

        Args:
            expr: The expression to evaluate.

        Returns:
            Membership of the whole tree.
        """
        if isinstance(expr, (Atom, Labeled)):
            return expr.value
        elif isinstance(expr, Not):
            return eval_not(expr, self)
        elif isinstance(expr, And):
            return eval_and(expr, self)
        elif isinstance(expr, Or):
            return eval_or(expr, self)
        elif isinstance(expr, Alternative):
            return self.evaluate(expr.branch)
        else:
            raise TypeError(f"Unknown expression type: {type(expr).__name__}")


_EVALUATOR = ExprEvaluator()


def evaluate_expression(expr: Expr) -> Membership:
    """
    Convenience function to evaluate an expression.

    Args:
        expr: The expression to evaluate.

    Returns:
        Membership of the whole tree.
    """
    return _EVALUATOR.evaluate(expr)
