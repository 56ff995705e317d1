"""Error types for utfstring.

Ordinary out-of-range indices never raise: the index operations answer
with the ``-1`` sentinel or an empty string.  The exceptions below are
reserved for input that cannot be represented as UTF-16 at all.
"""
from __future__ import annotations


class UtfStringError(Exception):
    """Base class for all errors raised by utfstring."""


class InvalidCodePointError(UtfStringError, ValueError):
    """Raised when a value cannot be encoded as a UTF-16 code point.

    Parameters
    ----------
    value:
        The offending value.
    position:
        0-based position of the value in the input sequence, or ``None``
        when a single value was converted.
    """

    def __init__(self, value: object, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Invalid code point {value!r}{where}: "
            "expected an integer in the range 0..0x10FFFF"
        )
        self.value = value
        self.position = position
