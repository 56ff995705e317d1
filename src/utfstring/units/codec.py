"""Conversions between Python strings and UTF-16 code-unit text.

Python strings index by code point; the rest of this package works on
*code-unit text*: a ``str`` whose every element is a single UTF-16 code
unit (``ord(ch) <= 0xFFFF``), with astral characters stored as a high
and a low surrogate.  Lone surrogates are carried through unchanged in
both directions (``surrogatepass``).
"""
from __future__ import annotations

import struct
from collections.abc import Iterable
from typing import Final

from utfstring.errors import InvalidCodePointError

HIGH_SURROGATE_MIN: Final[int] = 0xD800
HIGH_SURROGATE_MAX: Final[int] = 0xDBFF
LOW_SURROGATE_MIN: Final[int] = 0xDC00
LOW_SURROGATE_MAX: Final[int] = 0xDFFF
SUPPLEMENTARY_BASE: Final[int] = 0x10000
MAX_CODE_POINT: Final[int] = 0x10FFFF


def to_code_units(text: str) -> str:
    """Return ``text`` with every astral character split into a surrogate pair."""
    if text.isascii():
        return text
    raw = text.encode("utf-16-le", "surrogatepass")
    return "".join(map(chr, struct.unpack(f"<{len(raw) // 2}H", raw)))


def from_code_units(units: str) -> str:
    """Join surrogate pairs in ``units`` back into Python characters.

    This does the opposite of :func:`to_code_units`.
    """
    if units.isascii():
        return units
    return units.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def is_high_surrogate(unit: str) -> bool:
    return HIGH_SURROGATE_MIN <= ord(unit) <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: str) -> bool:
    return LOW_SURROGATE_MIN <= ord(unit) <= LOW_SURROGATE_MAX


def decode_pair(hi: int, lo: int) -> int:
    """Combine a high and a low surrogate into the code point they encode."""
    return (hi - HIGH_SURROGATE_MIN) * 0x400 + (lo - LOW_SURROGATE_MIN) + SUPPLEMENTARY_BASE


def encode_code_point(value: int, position: int | None = None) -> str:
    """Encode one code point as one or two code units.

    Raises
    ------
    InvalidCodePointError
        If ``value`` is not an integer in ``0..0x10FFFF``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCodePointError(value, position)
    if value < 0 or value > MAX_CODE_POINT:
        raise InvalidCodePointError(value, position)
    if value < SUPPLEMENTARY_BASE:
        return chr(value)
    value -= SUPPLEMENTARY_BASE
    return chr(HIGH_SURROGATE_MIN + (value >> 10)) + chr(LOW_SURROGATE_MIN + (value & 0x3FF))


def decode_code_points(units: str) -> list[int]:
    """Return the code points of ``units``, decoding well-formed pairs.

    An unpaired surrogate yields its own code-unit value.
    """
    result: list[int] = []
    i = 0
    n = len(units)
    while i < n:
        code = ord(units[i])
        if (
            HIGH_SURROGATE_MIN <= code <= HIGH_SURROGATE_MAX
            and i + 1 < n
            and is_low_surrogate(units[i + 1])
        ):
            result.append(decode_pair(code, ord(units[i + 1])))
            i += 2
        else:
            result.append(code)
            i += 1
    return result


def units_to_bytes(units: str) -> bytes:
    """Pack each code unit as two big-endian bytes."""
    return struct.pack(f">{len(units)}H", *map(ord, units))


def bytes_to_units(data: Iterable[int]) -> str:
    """Unpack big-endian byte pairs into code units.

    A trailing odd byte is read as the high byte of a unit whose low
    byte is zero.
    """
    raw = bytes(data)
    if len(raw) % 2:
        raw += b"\x00"
    return "".join(map(chr, struct.unpack(f">{len(raw) // 2}H", raw)))
