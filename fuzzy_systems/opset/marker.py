"""
OpsetMarker: apply an operation set to raw floats.

Convenience for call sites holding plain numbers rather than
Membership objects. Raw operands are validated like Membership(raw, opset).

Usage:
    marker = Yager1.marker()
    marker.negation(0.25)        # Membership(0.75, Yager1)
    marker.disjunction(0.1, 0.5) # Membership(0.6, Yager1)
"""

from __future__ import annotations

from numbers import Real
from typing import TYPE_CHECKING, Union

from ..value.membership import Membership
from ..value.traits import FuzzyValue

if TYPE_CHECKING:
    from .base import Opset


Operand = Union[float, FuzzyValue]


class OpsetMarker:
    """Binds an operation set for raw float calls."""

    __slots__ = ("opset",)

    def __init__(self, opset: type["Opset"]):
        self.opset = opset

    def _membership(self, value: Operand) -> Membership:
        if isinstance(value, FuzzyValue):
            return value.membership()
        if isinstance(value, Real) and not isinstance(value, bool):
            return Membership(float(value), self.opset)
        raise TypeError(
            f"OpsetMarker: operand must be a float or FuzzyValue, got {type(value).__name__}"
        )

    def negation(self, value: Operand) -> Membership:
        """Fuzzy negation (`not`)."""
        return self.opset.negation(self._membership(value))

    def disjunction(self, lhs: Operand, rhs: Operand) -> Membership:
        """Fuzzy alternative (`or`)."""
        return self.opset.disjunction(self._membership(lhs), self._membership(rhs))

    def conjunction(self, lhs: Operand, rhs: Operand) -> Membership:
        """Fuzzy conjunction (`and`)."""
        return self.opset.conjunction(self._membership(lhs), self._membership(rhs))

    def __repr__(self) -> str:
        return f"OpsetMarker({self.opset.__name__})"


__all__ = ["OpsetMarker"]
