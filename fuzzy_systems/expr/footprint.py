"""
Payload footprint of an expression tree.

Counts the bytes of data a tree owns at its leaves: each membership's
float, plus the label payload of Labeled leaves. Tag labels are shared,
data-free singletons and count zero; any other label (typically text)
counts its own size. Node bookkeeping (the dataclass objects themselves)
is not part of the payload.
"""

from __future__ import annotations

import sys
from typing import Any

from .nodes import Alternative, And, Atom, Expr, Labeled, Not, Or
from .tags import Tag


def label_payload(label: Any) -> int:
    """Bytes owned by a label."""
    if isinstance(label, Tag):
        return 0
    return sys.getsizeof(label)


def footprint(expr: Expr) -> int:
    """Total leaf payload of a tree, in bytes."""
    if isinstance(expr, Atom):
        return sys.getsizeof(expr.value.raw)
    if isinstance(expr, Labeled):
        return sys.getsizeof(expr.value.raw) + label_payload(expr.label)
    if isinstance(expr, Not):
        return footprint(expr.child)
    if isinstance(expr, (And, Or)):
        return footprint(expr.left) + footprint(expr.right)
    if isinstance(expr, Alternative):
        return footprint(expr.branch)
    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


__all__ = [
    "label_payload",
    "footprint",
]
