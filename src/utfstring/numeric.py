"""Normalization of loosely typed index arguments.

The range operations accept ``None``, NaN, infinities and even
non-numeric values for their bounds and normalize them instead of
raising.  These helpers decide what counts as a usable number.
"""
from __future__ import annotations

import math
import numbers
import sys


def is_defined(value: object) -> bool:
    """Return True if ``value`` is not ``None``."""
    return value is not None


def is_number(value: object) -> bool:
    """Return True if ``value`` is a real number other than NaN.

    Booleans are not numbers here.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def to_integer(value: numbers.Real) -> int:
    """Truncate ``value`` toward zero; infinities saturate at ``sys.maxsize``."""
    if math.isinf(value):
        return sys.maxsize if value > 0 else -sys.maxsize
    return int(value)
