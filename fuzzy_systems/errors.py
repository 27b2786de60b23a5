"""
Exception types for fuzzy expressions.

Every error is raised while a value or expression is being constructed
(or an infix expression compiled), never while one is evaluated. Each
class mixes in the matching builtin so callers may catch either the
library type or the plain Python one:

- OutOfRangeError:       strict Membership construction outside [0, 1]
- NotANumberError:       clamping construction given NaN
- OpsetMismatchError:    combining values/nodes of two operation sets
- ExpressionSyntaxError: malformed infix expression
- UnboundNameError:      infix expression names an operand nobody supplied
"""

from __future__ import annotations

from typing import Iterable, Optional


class FuzzyError(Exception):
    """Base class for all fuzzy_systems errors."""


class OutOfRangeError(FuzzyError, ValueError):
    """Raw value is not a valid membership degree."""

    def __init__(self, raw: float, opset_name: str = ""):
        self.raw = raw
        where = f" ({opset_name})" if opset_name else ""
        super().__init__(
            f"Membership{where}: value must be within [0.0, 1.0], got {raw!r}. "
            "Use Membership.with_fit() to clamp instead."
        )


class NotANumberError(FuzzyError, ValueError):
    """NaN was passed where a membership degree was expected."""

    def __init__(self, opset_name: str = ""):
        where = f" ({opset_name})" if opset_name else ""
        super().__init__(f"Membership{where}: cannot fit NaN into [0.0, 1.0]")


class OpsetMismatchError(FuzzyError, TypeError):
    """Two operands belong to different operation sets."""

    def __init__(self, operation: str, left: type, right: type):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"{operation}: operands use different operation sets "
            f"({left.__name__} vs {right.__name__}). "
            "Build every node of one expression under the same Opset."
        )


class ExpressionSyntaxError(FuzzyError, ValueError):
    """
    Malformed infix expression.

    Attributes:
        source: The full expression text
        position: Zero-based character offset of the offending token
        reason: Short description without the location diagram
    """

    def __init__(self, reason: str, source: str, position: int):
        self.reason = reason
        self.source = source
        self.position = position
        super().__init__(f"{reason} at position {position}\n{self.diagram()}")

    def diagram(self) -> str:
        """Two-line view of the source with a caret under the error."""
        return f"  {self.source}\n  {' ' * self.position}^"


class UnboundNameError(FuzzyError, LookupError):
    """Operand named in an expression has no value bound to it."""

    def __init__(self, name: str, message: str, available: Optional[Iterable[str]] = None):
        self.name = name
        self.available = sorted(available) if available is not None else None
        full_msg = f"Operand '{name}': {message}"
        if self.available:
            full_msg += f". Available: {', '.join(self.available)}"
        super().__init__(full_msg)


__all__ = [
    "FuzzyError",
    "OutOfRangeError",
    "NotANumberError",
    "OpsetMismatchError",
    "ExpressionSyntaxError",
    "UnboundNameError",
]
