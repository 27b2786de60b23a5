"""
Fuzzy values: membership degrees and the FuzzyValue mixin.
"""

from .membership import Membership, MIN_VALUE, MAX_VALUE
from .traits import FuzzyValue
from .formatting import format_raw

__all__ = [
    "Membership",
    "MIN_VALUE",
    "MAX_VALUE",
    "FuzzyValue",
    "format_raw",
]
