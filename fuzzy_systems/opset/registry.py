"""
Opset Registry - lookup of operation sets by name.

Every concrete Opset subclass registers itself here when its class body
runs. The expression core never consults the registry: operation sets are
chosen by passing the class itself. Only outer surfaces (CLI, config)
need name-based lookup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .base import Opset

logger = logging.getLogger("fuzzy_systems.opset")


OPSET_REGISTRY: Dict[str, type["Opset"]] = {}


def register_opset(opset: type["Opset"]) -> None:
    """
    Add an operation set under its name.

    Re-registering the same class (module reload) is allowed; two distinct
    classes claiming one name is an error.

    Raises:
        ValueError: If the name is already taken by another class
    """
    key = opset.name.lower()
    existing = OPSET_REGISTRY.get(key)
    if existing is not None and _qualified(existing) != _qualified(opset):
        raise ValueError(
            f"Opset name '{key}' already registered by {_qualified(existing)}; "
            f"cannot register {_qualified(opset)}. Set a distinct `name` attribute."
        )
    OPSET_REGISTRY[key] = opset
    logger.debug("registered opset %s as '%s'", opset.__name__, key)


def get_opset(name: str) -> Optional[type["Opset"]]:
    """
    Get operation set by name.

    Args:
        name: Registered name (case-insensitive)

    Returns:
        Opset subclass if known, None if unknown
    """
    return OPSET_REGISTRY.get(name.lower())


def require_opset(name: str) -> type["Opset"]:
    """
    Get operation set by name, failing loudly.

    Raises:
        KeyError: If no operation set is registered under name
    """
    opset = get_opset(name)
    if opset is None:
        raise KeyError(
            f"Unknown opset '{name}'. Available: {', '.join(list_opsets())}"
        )
    return opset


def list_opsets() -> List[str]:
    """Registered names, sorted."""
    return sorted(OPSET_REGISTRY)


def _qualified(opset: type) -> str:
    return f"{opset.__module__}.{opset.__qualname__}"


__all__ = [
    "OPSET_REGISTRY",
    "register_opset",
    "get_opset",
    "require_opset",
    "list_opsets",
]
