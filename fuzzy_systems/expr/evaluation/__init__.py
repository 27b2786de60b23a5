"""
Expression Evaluation Package.

- core.py: ExprEvaluator class and main evaluate() dispatch
- boolean_ops.py: Not, And, Or evaluation
- protocols.py: evaluator protocol shared by the op modules

Usage:
    from fuzzy_systems.expr.evaluation import ExprEvaluator, evaluate_expression

    evaluator = ExprEvaluator()
    value = evaluator.evaluate(expr)
"""

from .core import ExprEvaluator, evaluate_expression

__all__ = [
    "ExprEvaluator",
    "evaluate_expression",
]
