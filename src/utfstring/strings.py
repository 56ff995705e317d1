"""UTF-safe string wrappers.

``UtfString`` wraps a Python string and exposes the index-aware string
operations in logical-character coordinates, so an emoji counts as one
character no matter how many UTF-16 code units it needs.
``UtfVisualString`` additionally treats a regional-indicator flag as a
single character.

Example
-------
::

    from utfstring import UtfString, UtfVisualString

    text = UtfString("a🙂b")
    len(text)              # 3
    str(text[1])           # "🙂"
    text.index_of("b")     # 2

    len(UtfVisualString("🇩🇪x"))   # 2
"""
from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import ClassVar

from utfstring.classifier.classifier import (
    DEFAULT_CLASSIFIER,
    VISUAL_CLASSIFIER,
    CharClassifier,
)
from utfstring.ops.ranges import RangeOps
from utfstring.units.codec import from_code_units, to_code_units


def _units_of(value: object) -> str:
    if isinstance(value, UtfString):
        return value.code_units
    return to_code_units(str(value))


class UtfString:
    """Immutable string addressed by logical character.

    Parameters
    ----------
    value:
        A ``str``, another ``UtfString``, or any object (converted with
        ``str()``).  ``None`` gives the empty string.
    """

    classifier: ClassVar[CharClassifier] = DEFAULT_CLASSIFIER
    _ops: ClassVar[RangeOps] = RangeOps(DEFAULT_CLASSIFIER)

    __slots__ = ("_units",)

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._ops = RangeOps(cls.classifier)

    def __init__(self, value: object = None) -> None:
        if value is None:
            self._units = ""
        else:
            self._units = _units_of(value)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_code_units(cls, units: str) -> "UtfString":
        """Wrap text that is already in UTF-16 code-unit form."""
        instance = cls.__new__(cls)
        instance._units = units
        return instance

    @classmethod
    def from_code_points(cls, code_points: Iterable[int]) -> "UtfString":
        """Build a string from code points.

        Raises
        ------
        InvalidCodePointError
            If a value is not an integer in ``0..0x10FFFF``.
        """
        return cls.from_code_units(cls._ops.from_code_points(code_points))

    @classmethod
    def from_char_code(cls, code_point: int) -> "UtfString":
        """Build a one-character string from a single code point."""
        return cls.from_code_points([code_point])

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> "UtfString":
        """Build a string from big-endian code-unit byte pairs (see ``to_bytes``)."""
        return cls.from_code_units(cls._ops.from_bytes(data))

    # ------------------------------------------------------------------
    # Length and indexing
    # ------------------------------------------------------------------

    @property
    def code_units(self) -> str:
        """The underlying UTF-16 code-unit text."""
        return self._units

    @property
    def length(self) -> int:
        """Number of logical characters."""
        return self._ops.mapper.logical_length(self._units)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, key: int | slice) -> "UtfString":
        if isinstance(key, slice):
            if key.step is None or key.step == 1:
                return self.slice(key.start, key.stop)
            chars = self._ops.to_char_array(self._units)[key]
            return self.from_code_units("".join(chars))
        index = operator.index(key)
        if index < 0:
            index += self.length
        char = self._ops.char_at(self._units, index)
        if not char:
            raise IndexError(f"{type(self).__name__} index out of range")
        return self.from_code_units(char)

    def find_code_unit_index(self, char_index: object) -> int:
        """Return the code-unit offset of ``char_index`` (``-1`` when out of range)."""
        return self._ops.mapper.char_index_to_code_unit_index(self._units, char_index)

    def find_char_index(self, code_unit_index: object) -> int:
        """Return the character covering ``code_unit_index`` (``-1`` when out of range)."""
        return self._ops.mapper.code_unit_index_to_char_index(self._units, code_unit_index)

    def char_at(self, index: object = 0) -> "UtfString":
        """Return the character at ``index``; empty when out of range."""
        return self.from_code_units(self._ops.char_at(self._units, index))

    def char_code_at(self, index: object = 0) -> int:
        """Return the code point at ``index``; ``-1`` when out of range."""
        return self._ops.char_code_at(self._units, index)

    code_point_at = char_code_at

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def index_of(self, search_value: object, start: object = 0) -> int:
        return self._ops.index_of(self._units, _units_of(search_value), start)

    def last_index_of(self, search_value: object, start: object = None) -> int:
        return self._ops.last_index_of(self._units, _units_of(search_value), start)

    def includes(self, search_value: object, start: object = 0) -> bool:
        return self._ops.includes(self._units, _units_of(search_value), start)

    # ------------------------------------------------------------------
    # Extraction and padding
    # ------------------------------------------------------------------

    def slice(self, start: object = None, end: object = None) -> "UtfString":
        return self.from_code_units(self._ops.slice(self._units, start, end))

    def substr(self, start: object = None, length: object = None) -> "UtfString":
        return self.from_code_units(self._ops.substr(self._units, start, length))

    def substring(self, start: object = None, end: object = None) -> "UtfString":
        return self.from_code_units(self._ops.substring(self._units, start, end))

    def pad_start(self, target_length: object, pad_string: object = None) -> "UtfString":
        pad_units = None if pad_string is None else _units_of(pad_string)
        return self.from_code_units(self._ops.pad_start(self._units, target_length, pad_units))

    def pad_end(self, target_length: object, pad_string: object = None) -> "UtfString":
        pad_units = None if pad_string is None else _units_of(pad_string)
        return self.from_code_units(self._ops.pad_end(self._units, target_length, pad_units))

    def split(self, separator: object = None, limit: int | None = None) -> list["UtfString"]:
        """Split around ``separator``; an empty separator splits into characters.

        ``limit`` caps the number of returned parts.
        """
        if separator is None:
            parts = [self._units]
        elif _units_of(separator) == "":
            parts = self._ops.to_char_array(self._units)
        else:
            parts = self._units.split(_units_of(separator))
        if limit is not None:
            parts = parts[:max(limit, 0)]
        return [self.from_code_units(part) for part in parts]

    def concat(self, *items: object) -> "UtfString":
        return self.from_code_units(self._units + "".join(_units_of(item) for item in items))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_char_array(self) -> list[str]:
        """Return the logical characters as Python strings."""
        return [from_code_units(char) for char in self._ops.to_char_array(self._units)]

    def to_code_points(self) -> list[int]:
        return self._ops.to_code_points(self._units)

    def to_bytes(self) -> bytes:
        """Return two big-endian bytes per code unit."""
        return self._ops.to_bytes(self._units)

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        return other is not None and self._units == _units_of(other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (UtfString, str)):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        # equal to a plain str, so hash like one
        return hash(from_code_units(self._units))

    def __add__(self, other: object) -> "UtfString":
        if isinstance(other, (UtfString, str)):
            return self.concat(other)
        return NotImplemented

    def __radd__(self, other: object) -> "UtfString":
        if isinstance(other, str):
            return self.from_code_units(to_code_units(other) + self._units)
        return NotImplemented

    def __str__(self) -> str:
        return from_code_units(self._units)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class UtfVisualString(UtfString):
    """``UtfString`` that also treats regional-indicator flags as one character."""

    classifier = VISUAL_CLASSIFIER
    __slots__ = ()
