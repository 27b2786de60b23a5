"""
Shared protocols for expression evaluation.

Provides Protocol classes to avoid circular imports between evaluation modules.
"""

from __future__ import annotations

from typing import Protocol

from ...value.membership import Membership
from ..nodes import Expr


class ExprEvaluatorProtocol(Protocol):
    """Protocol for expression evaluator to avoid circular imports."""

    def evaluate(self, expr: Expr) -> Membership: ...
