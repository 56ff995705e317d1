"""Code-unit conversion helpers.

Exports the functions that move text between natural Python strings,
UTF-16 code-unit form, code points, and big-endian byte pairs.
"""
from __future__ import annotations

from utfstring.units.codec import (
    bytes_to_units,
    decode_code_points,
    decode_pair,
    encode_code_point,
    from_code_units,
    is_high_surrogate,
    is_low_surrogate,
    to_code_units,
    units_to_bytes,
)

__all__ = [
    "to_code_units",
    "from_code_units",
    "is_high_surrogate",
    "is_low_surrogate",
    "decode_pair",
    "encode_code_point",
    "decode_code_points",
    "units_to_bytes",
    "bytes_to_units",
]
