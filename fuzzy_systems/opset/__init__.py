"""
Fuzzy operation sets.

An operation set (Opset subclass) defines negation, disjunction and
conjunction over membership degrees. The catalogue module ships the
Yager and Hamacher families; custom sets subclass Opset directly.
"""

from .base import Opset, RAW_HOOKS, is_differentiable
from .catalogue import Yager1, YagerInf, Hamacher0, Hamacher1, Hamacher2
from .marker import OpsetMarker
from .registry import (
    OPSET_REGISTRY,
    register_opset,
    get_opset,
    require_opset,
    list_opsets,
)

__all__ = [
    # Base
    "Opset",
    "RAW_HOOKS",
    "is_differentiable",
    # Catalogue
    "Yager1",
    "YagerInf",
    "Hamacher0",
    "Hamacher1",
    "Hamacher2",
    # Raw float access
    "OpsetMarker",
    # Registry
    "OPSET_REGISTRY",
    "register_opset",
    "get_opset",
    "require_opset",
    "list_opsets",
]
