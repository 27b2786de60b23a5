"""
Alternative: one of two differently shaped expressions, chosen at runtime.

Lets branching code hand back a single node type:

    d = (a | b).as_left() if flag else (a & c).as_right()

Evaluation and rendering delegate to whichever arm is populated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .base import ExprNode

if TYPE_CHECKING:
    from ...opset.base import Opset


class Side(Enum):
    """Which arm of an Alternative is populated."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, repr=False)
class Alternative(ExprNode):
    """
    Two-armed choice holding exactly one expression.

    Attributes:
        side: Populated arm
        branch: The expression in that arm

    Examples:
        Alternative.left(a | b)
        Alternative.right(a & c)
    """
    side: Side
    branch: ExprNode

    def __post_init__(self):
        if not isinstance(self.side, Side):
            raise TypeError(f"Alternative: side must be a Side, got {self.side!r}")
        if not isinstance(self.branch, ExprNode):
            raise TypeError(
                f"Alternative: branch must be an expression node, got {type(self.branch).__name__}"
            )

    @classmethod
    def left(cls, branch: ExprNode) -> "Alternative":
        return cls(Side.LEFT, branch)

    @classmethod
    def right(cls, branch: ExprNode) -> "Alternative":
        return cls(Side.RIGHT, branch)

    @property
    def is_left(self) -> bool:
        return self.side is Side.LEFT

    @property
    def is_right(self) -> bool:
        return self.side is Side.RIGHT

    @property
    def opset(self) -> type["Opset"]:
        return self.branch.opset

    def __repr__(self) -> str:
        return f"Alternative({self.side.name}, {self.branch!r})"


__all__ = [
    "Side",
    "Alternative",
]
