"""
Expression type alias.

Placed in a separate module to avoid circular imports.
"""

from __future__ import annotations

from .alternative import Alternative
from .atoms import Atom, Labeled
from .boolean import And, Not, Or


# All node types that can appear in an expression tree
Expr = Atom | Labeled | Not | And | Or | Alternative

LEAF_TYPES = (Atom, Labeled)


__all__ = [
    "Expr",
    "LEAF_TYPES",
]
