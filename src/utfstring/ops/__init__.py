"""Logical-character string operations.

Exports the ``RangeOps`` class and one module-level function per
operation; each function takes an optional ``classifier``.
"""
from __future__ import annotations

from utfstring.ops.ranges import (
    RangeOps,
    char_at,
    char_code_at,
    from_bytes,
    from_code_points,
    index_of,
    last_index_of,
    pad_end,
    pad_start,
    slice,
    substr,
    substring,
    to_bytes,
    to_char_array,
    to_code_points,
)

__all__ = [
    "RangeOps",
    "slice",
    "substr",
    "substring",
    "char_at",
    "char_code_at",
    "index_of",
    "last_index_of",
    "pad_start",
    "pad_end",
    "to_char_array",
    "to_code_points",
    "from_code_points",
    "to_bytes",
    "from_bytes",
]
