"""
Canonical numeric text for membership degrees.

Rendered expressions must be byte-for-byte stable, so every degree is
printed as the shortest decimal that round-trips to the same float, in
positional notation, without a trailing ".0":

    0.1   -> "0.1"
    1.0   -> "1"
    1e-07 -> "0.0000001"
"""

from __future__ import annotations

import numpy as np


def format_raw(raw: float) -> str:
    """Format a raw degree as canonical text."""
    return np.format_float_positional(float(raw), unique=True, trim="-")


__all__ = ["format_raw"]
