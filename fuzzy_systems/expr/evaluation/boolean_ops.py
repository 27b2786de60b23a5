"""
Operator evaluation for Not, And, Or.

Post-order: operands are evaluated first (left, then right), then the
node's operation set combines them. Both operands are always evaluated.
"""

from __future__ import annotations

from ...value.membership import Membership
from ..nodes import And, Not, Or
from .protocols import ExprEvaluatorProtocol


def eval_not(expr: Not, evaluator: ExprEvaluatorProtocol) -> Membership:
    """Evaluate Not: negation of the child's value."""
    value = evaluator.evaluate(expr.child)
    return expr.opset.negation(value)


def eval_and(expr: And, evaluator: ExprEvaluatorProtocol) -> Membership:
    """Evaluate And: conjunction of both operands."""
    lhs = evaluator.evaluate(expr.left)
    rhs = evaluator.evaluate(expr.right)
    return expr.opset.conjunction(lhs, rhs)


def eval_or(expr: Or, evaluator: ExprEvaluatorProtocol) -> Membership:
    """Evaluate Or: disjunction of both operands."""
    lhs = evaluator.evaluate(expr.left)
    rhs = evaluator.evaluate(expr.right)
    return expr.opset.disjunction(lhs, rhs)
