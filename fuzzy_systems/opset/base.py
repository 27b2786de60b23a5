"""
Opset: a pluggable fuzzy operation set.

An operation set is a strategy defining negation, disjunction and
conjunction over membership degrees. Strategies are classes, never
instances: the class itself is what a Membership or expression node
carries, so two operation sets can never be confused at runtime.

Defining one:

    class Product(Opset):
        \"\"\"Probabilistic sum / product.\"\"\"
        differentiable = True

        @staticmethod
        def raw_not(x): return 1.0 - x

        @staticmethod
        def raw_or(a, b): return a + b - a * b

        @staticmethod
        def raw_and(a, b): return a * b

The three raw hooks receive and return plain floats. Their results are
wrapped with Membership.unchecked(), so an implementation is responsible
for staying within [0, 1] for every valid input. That obligation is not
re-checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Tuple

from ..errors import OpsetMismatchError
from ..value.membership import Membership
from .registry import register_opset

if TYPE_CHECKING:
    from ..expr.nodes.atoms import Atom
    from .marker import OpsetMarker


RAW_HOOKS = ("raw_not", "raw_or", "raw_and")


class Opset:
    """
    Base class for operation sets.

    Class attributes:
        name: Registry key (defaults to the lower-cased class name)
        differentiable: True when all three operations are differentiable
        notation: Human-readable formulas, for listings only

    Class keyword arguments:
        abstract: Skip hook validation and registration (intermediate bases)
        register: Set False to keep a concrete opset out of the registry
    """

    name: ClassVar[str] = ""
    differentiable: ClassVar[bool] = False
    notation: ClassVar[Tuple[str, ...]] = ()

    def __init_subclass__(cls, abstract: bool = False, register: bool = True, **kwargs):
        super().__init_subclass__(**kwargs)
        if abstract:
            return
        missing = [hook for hook in RAW_HOOKS if not callable(getattr(cls, hook, None))]
        if missing:
            raise TypeError(
                f"Opset {cls.__name__}: missing operation hooks {missing}. "
                f"Required: {', '.join(RAW_HOOKS)}"
            )
        if "name" not in cls.__dict__:
            cls.name = cls.__name__.lower()
        if register:
            register_opset(cls)

    def __new__(cls, *args, **kwargs):
        raise TypeError(
            f"{cls.__name__} is an operation set; pass the class itself, do not instantiate it"
        )

    # -------------------------------------------------------------------------
    # Operations on memberships
    # -------------------------------------------------------------------------

    @classmethod
    def negation(cls, value: Membership) -> Membership:
        """Fuzzy negation (`not`)."""
        cls._check_operand("negation", value)
        return Membership.unchecked(cls.raw_not(value.raw), cls)

    @classmethod
    def disjunction(cls, lhs: Membership, rhs: Membership) -> Membership:
        """Fuzzy alternative (`or`)."""
        cls._check_operand("disjunction", lhs)
        cls._check_operand("disjunction", rhs)
        return Membership.unchecked(cls.raw_or(lhs.raw, rhs.raw), cls)

    @classmethod
    def conjunction(cls, lhs: Membership, rhs: Membership) -> Membership:
        """Fuzzy conjunction (`and`)."""
        cls._check_operand("conjunction", lhs)
        cls._check_operand("conjunction", rhs)
        return Membership.unchecked(cls.raw_and(lhs.raw, rhs.raw), cls)

    @classmethod
    def _check_operand(cls, operation: str, value: Membership) -> None:
        if value.opset is not cls:
            raise OpsetMismatchError(operation, cls, value.opset)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def member(cls, raw: float) -> Membership:
        """Validated membership under this operation set."""
        return Membership(raw, cls)

    @classmethod
    def atom(cls, raw: float) -> "Atom":
        """Expression leaf holding a validated membership."""
        from ..expr.nodes.atoms import Atom

        return Atom(Membership(raw, cls))

    @classmethod
    def marker(cls) -> "OpsetMarker":
        """Marker for applying this operation set to raw floats."""
        from .marker import OpsetMarker

        return OpsetMarker(cls)

    @classmethod
    def describe(cls) -> str:
        """First docstring line, or the class name."""
        doc = (cls.__doc__ or "").strip()
        return doc.splitlines()[0] if doc else cls.__name__


def is_differentiable(opset: type[Opset]) -> bool:
    """True if every operation of the set is differentiable."""
    return bool(opset.differentiable)


__all__ = [
    "Opset",
    "RAW_HOOKS",
    "is_differentiable",
]
