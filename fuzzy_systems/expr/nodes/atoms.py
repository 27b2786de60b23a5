"""
Leaf nodes: Atom and Labeled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...value.membership import Membership
from .base import ExprNode

if TYPE_CHECKING:
    from ...opset.base import Opset


def _require_membership(node: str, value: object) -> None:
    if not isinstance(value, Membership):
        raise TypeError(
            f"{node}: value must be a Membership, got {type(value).__name__}. "
            "Use Opset.member(raw) or Membership(raw, opset)."
        )


@dataclass(frozen=True, repr=False)
class Atom(ExprNode):
    """
    Leaf holding a membership degree. Renders as its numeric value.

    Attributes:
        value: The validated membership

    Examples:
        Atom(Membership(0.4, Hamacher1))
        Hamacher1.atom(0.4)             # same
    """
    value: Membership

    def __post_init__(self):
        _require_membership("Atom", self.value)

    @property
    def opset(self) -> type["Opset"]:
        return self.value.opset

    def with_label(self, label: Any) -> "Labeled":
        """Attach a display label (see combinators.attach_label)."""
        from ..combinators import attach_label

        return attach_label(self, label)

    def __repr__(self) -> str:
        return f"Atom({self.value})"


@dataclass(frozen=True, repr=False)
class Labeled(ExprNode):
    """
    Leaf holding a membership and a display label.

    The label replaces the numeric value when rendering and is ignored by
    evaluation. Any object with a string form works; Tag instances carry
    no data of their own.

    Attributes:
        value: The validated membership
        label: Display label (str, Tag, ...)

    Examples:
        Labeled(Hamacher1.member(0.1), "a")
        Labeled(Hamacher1.member(0.1), TagA)
    """
    value: Membership
    label: Any

    def __post_init__(self):
        _require_membership("Labeled", self.value)
        if self.label is None:
            raise ValueError("Labeled: label is required")

    @property
    def opset(self) -> type["Opset"]:
        return self.value.opset

    def __repr__(self) -> str:
        return f"Labeled({self.value}, {self.label!r})"


__all__ = [
    "Atom",
    "Labeled",
]
