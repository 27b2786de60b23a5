"""
Standard operation sets.

Yager and Hamacher families at commonly used parameters. All share the
standard negation 1 - x.

Degenerate points: Hamacher0 divides 0/0 at a = b = 0 (conjunction) and
a = b = 1 (disjunction); those points take their limit values 0 and 1.

Rational formulas can round a hair past a bound (Hamacher0 gives
1.0000000000000018 for a = 1, b = 0.9406977951970535), so their results
are clamped into [0, 1].
"""

from __future__ import annotations

from ..value.membership import MAX_VALUE, MIN_VALUE
from .base import Opset


def _clamp(raw: float) -> float:
    return min(max(raw, MIN_VALUE), MAX_VALUE)


class Yager1(Opset):
    """Yager fuzzy operation set with w = 1."""

    notation = ("~x = 1 - x", "a | b = min(a + b, 1)", "a & b = max(a + b, 1) - 1")

    @staticmethod
    def raw_not(x: float) -> float:
        return 1.0 - x

    @staticmethod
    def raw_or(a: float, b: float) -> float:
        return min(a + b, 1.0)

    @staticmethod
    def raw_and(a: float, b: float) -> float:
        return max(a + b, 1.0) - 1.0


class YagerInf(Opset):
    """Yager fuzzy operation set with w -> inf."""

    notation = ("~x = 1 - x", "a | b = max(a, b)", "a & b = min(a, b)")

    @staticmethod
    def raw_not(x: float) -> float:
        return 1.0 - x

    @staticmethod
    def raw_or(a: float, b: float) -> float:
        return max(a, b)

    @staticmethod
    def raw_and(a: float, b: float) -> float:
        return min(a, b)


class Hamacher0(Opset):
    """Hamacher fuzzy operation set with gamma = 0."""

    notation = (
        "~x = 1 - x",
        "a | b = (a + b - 2ab) / (1 - ab)",
        "a & b = ab / (a + b - ab)",
    )

    @staticmethod
    def raw_not(x: float) -> float:
        return 1.0 - x

    @staticmethod
    def raw_or(a: float, b: float) -> float:
        denominator = 1.0 - a * b
        if denominator == 0.0:
            return 1.0
        return _clamp((a + b - 2.0 * a * b) / denominator)

    @staticmethod
    def raw_and(a: float, b: float) -> float:
        denominator = a + b - a * b
        if denominator == 0.0:
            return 0.0
        return _clamp((a * b) / denominator)


class Hamacher1(Opset):
    """Hamacher fuzzy operation set with gamma = 1."""

    differentiable = True
    notation = ("~x = 1 - x", "a | b = a + b - ab", "a & b = ab")

    @staticmethod
    def raw_not(x: float) -> float:
        return 1.0 - x

    @staticmethod
    def raw_or(a: float, b: float) -> float:
        return _clamp(a + b - a * b)

    @staticmethod
    def raw_and(a: float, b: float) -> float:
        return a * b


class Hamacher2(Opset):
    """Hamacher fuzzy operation set with gamma = 2."""

    differentiable = True
    notation = (
        "~x = 1 - x",
        "a | b = (a + b) / (1 + ab)",
        "a & b = ab / (2 - a - b + ab)",
    )

    @staticmethod
    def raw_not(x: float) -> float:
        return 1.0 - x

    @staticmethod
    def raw_or(a: float, b: float) -> float:
        return _clamp((a + b) / (1.0 + a * b))

    @staticmethod
    def raw_and(a: float, b: float) -> float:
        return _clamp((a * b) / (2.0 - a - b + a * b))


__all__ = [
    "Yager1",
    "YagerInf",
    "Hamacher0",
    "Hamacher1",
    "Hamacher2",
]
