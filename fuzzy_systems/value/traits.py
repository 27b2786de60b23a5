"""
FuzzyValue: anything that can report a membership degree.

Domain objects become fuzzy values by implementing membership(); the
mixin then gives them expression conversion and the value operators.

Example:
    class ThreatLevel(FuzzyValue, Enum):
        LOW = 0.2
        HIGH = 0.7

        def membership(self) -> Membership:
            return Membership(self.value, Hamacher1)

    ThreatLevel.LOW | ThreatLevel.HIGH   # Membership(0.76, Hamacher1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..expr.nodes.atoms import Atom
    from .membership import Membership


class FuzzyValue:
    """
    Mixin for values carrying a membership degree under one operation set.

    Subclasses implement membership(); negation, conjunction and
    disjunction are evaluated immediately with the value's operation set.
    Plain class rather than an ABC so it mixes into Enum.
    """

    __slots__ = ()

    def membership(self) -> "Membership":
        """Membership degree of this value."""
        raise NotImplementedError(f"{type(self).__name__} must implement membership()")

    def to_expr(self) -> "Atom":
        """Wrap this value's membership in an expression leaf."""
        from ..expr.nodes.atoms import Atom

        return Atom(self.membership())

    def __invert__(self) -> "Membership":
        m = self.membership()
        return m.opset.negation(m)

    def __and__(self, other: object) -> "Membership":
        if not isinstance(other, FuzzyValue):
            return NotImplemented
        m = self.membership()
        return m.opset.conjunction(m, other.membership())

    def __or__(self, other: object) -> "Membership":
        if not isinstance(other, FuzzyValue):
            return NotImplemented
        m = self.membership()
        return m.opset.disjunction(m, other.membership())


__all__ = ["FuzzyValue"]
