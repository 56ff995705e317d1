"""Index mapping module.

Exports the ``IndexMapper`` class and its module-level convenience
functions.
"""
from __future__ import annotations

from utfstring.mapper.mapper import (
    IndexMapper,
    char_index_to_code_unit_index,
    code_unit_index_to_char_index,
    logical_length,
)

__all__ = [
    "IndexMapper",
    "char_index_to_code_unit_index",
    "code_unit_index_to_char_index",
    "logical_length",
]
