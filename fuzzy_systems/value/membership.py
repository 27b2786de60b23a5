"""
Membership: an atomic fuzzy truth degree.

A Membership is a float in the closed interval [0.0, 1.0] tagged with the
operation set (Opset subclass) it belongs to. Instances are immutable and
freely copied.

Construction paths:
- Membership(raw, opset)            validating, raises OutOfRangeError
- Membership.try_new(raw, opset)    validating, returns None instead
- Membership.with_fit(raw, opset)   clamps to the nearest bound, raises
                                    NotANumberError only for NaN
- Membership.unchecked(raw, opset)  no validation; only for Opset
                                    implementations that have already
                                    proven the result stays in range

Usage:
    a = Membership(0.5, YagerInf)
    b = Membership(0.3, YagerInf)
    (~b).as_raw()     # 0.7
    (a & b).as_raw()  # 0.3
    (a | b).as_raw()  # 0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Optional

from ..errors import NotANumberError, OpsetMismatchError, OutOfRangeError
from .formatting import format_raw
from .traits import FuzzyValue

if TYPE_CHECKING:
    from ..opset.base import Opset


MIN_VALUE = 0.0
MAX_VALUE = 1.0


def _in_range(raw: float) -> bool:
    # NaN compares False both ways, so it is rejected here too.
    return MIN_VALUE <= raw <= MAX_VALUE


def _check_opset(opset: object) -> None:
    from ..opset.base import Opset

    if not (isinstance(opset, type) and issubclass(opset, Opset)):
        raise TypeError(
            f"Membership: opset must be an Opset subclass, got {opset!r}"
        )


@dataclass(frozen=True)
class Membership(FuzzyValue):
    """
    Fuzzy membership degree bound to an operation set.

    Attributes:
        raw: The degree, 0.0 <= raw <= 1.0
        opset: Operation set class used by ~, & and |
    """
    raw: float
    opset: type["Opset"]

    def __post_init__(self):
        """Validate range and operation set."""
        if isinstance(self.raw, bool) or not isinstance(self.raw, Real):
            raise TypeError(
                f"Membership: raw value must be a real number, got {type(self.raw).__name__}"
            )
        _check_opset(self.opset)
        raw = float(self.raw)
        if not _in_range(raw):
            raise OutOfRangeError(raw, self.opset.__name__)
        object.__setattr__(self, "raw", raw)

    @classmethod
    def unchecked(cls, raw: float, opset: type["Opset"]) -> "Membership":
        """
        Create without validation.

        Caller contract: 0.0 <= raw <= 1.0 already holds. Used by Opset
        implementations; a buggy custom Opset can leak out-of-range values
        through here and nothing downstream re-checks them.
        """
        inst = object.__new__(cls)
        object.__setattr__(inst, "raw", raw)
        object.__setattr__(inst, "opset", opset)
        return inst

    @classmethod
    def try_new(cls, raw: float, opset: type["Opset"]) -> Optional["Membership"]:
        """Create if raw is within [0, 1], else return None."""
        if not _in_range(raw):
            return None
        return cls(raw, opset)

    @classmethod
    def with_fit(cls, raw: float, opset: type["Opset"]) -> "Membership":
        """Create by clamping raw into [0, 1]. NaN cannot be fitted."""
        if math.isnan(raw):
            raise NotANumberError(getattr(opset, "__name__", ""))
        return cls(min(max(float(raw), MIN_VALUE), MAX_VALUE), opset)

    def as_raw(self) -> float:
        """Raw numerical degree."""
        return self.raw

    def membership(self) -> "Membership":
        return self

    def __float__(self) -> float:
        return self.raw

    # Ordering compares degrees; both sides must share an operation set.

    def _other_raw(self, other: object) -> Optional[float]:
        if isinstance(other, Membership):
            if other.opset is not self.opset:
                raise OpsetMismatchError("compare", self.opset, other.opset)
            return other.raw
        if isinstance(other, Real) and not isinstance(other, bool):
            return float(other)
        return None

    def __lt__(self, other: object) -> bool:
        raw = self._other_raw(other)
        return NotImplemented if raw is None else self.raw < raw

    def __le__(self, other: object) -> bool:
        raw = self._other_raw(other)
        return NotImplemented if raw is None else self.raw <= raw

    def __gt__(self, other: object) -> bool:
        raw = self._other_raw(other)
        return NotImplemented if raw is None else self.raw > raw

    def __ge__(self, other: object) -> bool:
        raw = self._other_raw(other)
        return NotImplemented if raw is None else self.raw >= raw

    def __str__(self) -> str:
        return format_raw(self.raw)

    def __repr__(self) -> str:
        return f"Membership({self.raw!r}, {self.opset.__name__})"


__all__ = [
    "Membership",
    "MIN_VALUE",
    "MAX_VALUE",
]
