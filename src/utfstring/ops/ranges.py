"""Range, search, padding and code-point operations in character coordinates.

Every operation converts its logical-character arguments to code-unit
offsets through an ``IndexMapper`` and then delegates to the native
``str`` operation on the code-unit text.  Results are code-unit text
(see ``utfstring.units``) or logical indices.

Out-of-range indices never raise: searches answer ``-1`` and
extractions answer ``""``.  Bounds that are ``None``, NaN or not
numbers at all are normalized as documented on each method.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from itertools import cycle, islice

from utfstring.classifier.classifier import CharClassifier
from utfstring.mapper.mapper import IndexMapper
from utfstring.numeric import is_number, to_integer
from utfstring.units.codec import (
    bytes_to_units,
    decode_code_points,
    encode_code_point,
    units_to_bytes,
)

logger = logging.getLogger(__name__)


class RangeOps:
    """String operations addressed by logical character.

    Parameters
    ----------
    classifier:
        Strategy deciding which code-unit spans form one logical
        character.  Defaults to the surrogate-pair classifier.
    """

    __slots__ = ("_mapper",)

    def __init__(self, classifier: CharClassifier | None = None) -> None:
        self._mapper = IndexMapper(classifier)

    @property
    def mapper(self) -> IndexMapper:
        return self._mapper

    @property
    def classifier(self) -> CharClassifier:
        return self._mapper.classifier

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def slice(self, text: str, start: object = None, end: object = None) -> str:
        """Return the characters from ``start`` up to, not including, ``end``.

        Negative bounds count back from the logical length and clamp at
        zero.  A non-numeric ``start`` means 0; an omitted or non-numeric
        ``end``, or one at or past the logical length, means the end of
        the text.
        """
        length = self._mapper.logical_length(text)

        if not is_number(start):
            start_index = 0
        else:
            start_index = to_integer(start)  # type: ignore[arg-type]
            if start_index < 0:
                start_index = max(length + start_index, 0)

        if not is_number(end) or to_integer(end) >= length:  # type: ignore[arg-type]
            end_unit = len(text)
        else:
            end_index = to_integer(end)  # type: ignore[arg-type]
            if end_index < 0:
                end_index = max(length + end_index, 0)
            end_unit = self._unit_or_end(text, end_index)

        start_unit = self._unit_or_end(text, start_index)
        return text[start_unit:end_unit]

    def substr(self, text: str, start: object = None, length: object = None) -> str:
        """Return ``length`` characters beginning at ``start``.

        A negative ``start`` counts back from the end.  A supplied
        ``length`` that is not a positive number yields ``""``.
        """
        start_index = to_integer(start) if is_number(start) else 0  # type: ignore[arg-type]
        if length is not None:
            if not is_number(length):
                return ""
            count = to_integer(length)  # type: ignore[arg-type]
            if count <= 0:
                return ""
        if start_index < 0:
            start_index = max(self._mapper.logical_length(text) + start_index, 0)
        if length is None:
            return self.slice(text, start_index)
        return self.slice(text, start_index, start_index + count)

    def substring(self, text: str, start: object = None, end: object = None) -> str:
        """Return the characters between ``start`` and ``end``.

        Both bounds clamp to ``[0, length]`` and are swapped when
        ``start > end``.  An omitted ``end`` means the logical length;
        NaN or non-numeric bounds mean 0.
        """
        length = self._mapper.logical_length(text)
        start_index = max(to_integer(start), 0) if is_number(start) else 0  # type: ignore[arg-type]
        if end is None:
            end_index = length
        elif is_number(end):
            end_index = max(to_integer(end), 0)  # type: ignore[arg-type]
        else:
            end_index = 0
        start_index = min(start_index, length)
        end_index = min(end_index, length)
        if start_index > end_index:
            start_index, end_index = end_index, start_index
        return self.slice(text, start_index, end_index)

    def char_at(self, text: str, char_index: object = 0) -> str:
        """Return the code units of the character at ``char_index``, or ``""``.

        Fractional indices truncate toward zero; ``None``, NaN and other
        non-numbers mean 0.
        """
        index = to_integer(char_index) if is_number(char_index) else 0  # type: ignore[arg-type]
        unit = self._mapper.char_index_to_code_unit_index(text, index)
        if unit < 0:
            return ""
        return text[unit:unit + self.classifier.span_at(text, unit)]

    def char_code_at(self, text: str, char_index: object = 0) -> int:
        """Return the first code point of the character at ``char_index``, or ``-1``.

        ``char_index`` is normalized as in ``char_at``.
        """
        char = self.char_at(text, char_index)
        if not char:
            return -1
        return decode_code_points(char)[0]

    def to_char_array(self, text: str) -> list[str]:
        """Split ``text`` into its logical characters."""
        return list(self.classifier.iter_chars(text))

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def index_of(self, text: str, needle: str, start: object = 0) -> int:
        """Return the character index of the first ``needle`` at or after ``start``.

        A negative ``start`` searches from the beginning; a ``start`` at
        or past the logical length finds nothing.
        """
        start_unit = self._search_start(text, start)
        if start_unit < 0:
            return -1
        hit = text.find(needle, start_unit)
        return -1 if hit < 0 else self._mapper.code_unit_index_to_char_index(text, hit)

    def last_index_of(self, text: str, needle: str, start: object = None) -> int:
        """Return the character index of the last ``needle`` starting at or before ``start``.

        Without ``start`` the whole text is searched, and an empty
        ``needle`` is found at the logical length.
        """
        if not is_number(start):
            hit = text.rfind(needle)
            if hit == len(text):
                return self._mapper.logical_length(text)
        else:
            start_unit = self._search_start(text, start)
            if start_unit < 0:
                return -1
            hit = text.rfind(needle, 0, start_unit + len(needle))
        return -1 if hit < 0 else self._mapper.code_unit_index_to_char_index(text, hit)

    def includes(self, text: str, needle: str, start: object = 0) -> bool:
        """Return True if ``needle`` occurs at or after ``start``."""
        return self.index_of(text, needle, start) != -1

    # ------------------------------------------------------------------
    # Padding
    # ------------------------------------------------------------------

    def pad_start(self, text: str, target_length: object, pad_text: str | None = " ") -> str:
        """Prepend characters of ``pad_text`` until ``text`` is ``target_length`` long.

        A target that is not a finite number leaves ``text`` unchanged.
        """
        padding = self._padding(text, target_length, pad_text, at_start=True)
        return padding + text

    def pad_end(self, text: str, target_length: object, pad_text: str | None = " ") -> str:
        """Append characters of ``pad_text`` until ``text`` is ``target_length`` long."""
        return text + self._padding(text, target_length, pad_text, at_start=False)

    # ------------------------------------------------------------------
    # Code points and bytes
    # ------------------------------------------------------------------

    def to_code_points(self, text: str) -> list[int]:
        """Return the code points of every logical character, in order."""
        return [
            code_point
            for char in self.classifier.iter_chars(text)
            for code_point in decode_code_points(char)
        ]

    @staticmethod
    def from_code_points(code_points: Iterable[int]) -> str:
        """Encode ``code_points`` as code-unit text.

        Raises
        ------
        InvalidCodePointError
            If a value is not an integer in ``0..0x10FFFF``.
        """
        return "".join(
            encode_code_point(value, position) for position, value in enumerate(code_points)
        )

    @staticmethod
    def to_bytes(text: str) -> bytes:
        """Return two big-endian bytes per code unit."""
        return units_to_bytes(text)

    @staticmethod
    def from_bytes(data: Iterable[int]) -> str:
        """Rebuild code-unit text from big-endian byte pairs."""
        return bytes_to_units(data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _unit_or_end(self, text: str, char_index: int) -> int:
        unit = self._mapper.char_index_to_code_unit_index(text, char_index)
        return len(text) if unit < 0 else unit

    def _search_start(self, text: str, start: object) -> int:
        start_index = to_integer(start) if is_number(start) else 0  # type: ignore[arg-type]
        return self._mapper.char_index_to_code_unit_index(text, max(start_index, 0))

    def _padding(
        self, text: str, target_length: object, pad_text: str | None, at_start: bool
    ) -> str:
        if not is_number(target_length):
            return ""
        if math.isinf(target_length):  # type: ignore[arg-type]
            logger.debug("Infinite target length; leaving text unpadded")
            return ""
        target = to_integer(target_length)  # type: ignore[arg-type]
        needed = target - self._mapper.logical_length(text)
        if needed <= 0:
            return ""
        pad_chars = self.to_char_array(" " if pad_text is None else pad_text)
        if not pad_chars:
            logger.debug("Empty pad text; leaving %d-character text unpadded", target - needed)
            return ""

        # Each added character grows the length by at most one, so
        # ``needed`` characters never overshoot.  Adjacent spans can merge
        # across the seam, which the top-up loop below accounts for.
        source: Iterator[str] = cycle(pad_chars)
        padding = "".join(islice(source, needed))
        while self._mapper.logical_length(self._join(padding, text, at_start)) < target:
            padding += next(source)
        return padding

    @staticmethod
    def _join(padding: str, text: str, at_start: bool) -> str:
        return padding + text if at_start else text + padding

    def __repr__(self) -> str:
        return f"RangeOps(classifier={self.classifier!r})"


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def slice(  # noqa: A001
    text: str, start: object = None, end: object = None, classifier: CharClassifier | None = None
) -> str:
    """Slice ``text`` by logical character.  See ``RangeOps.slice``."""
    return RangeOps(classifier).slice(text, start, end)


def substr(
    text: str, start: object = None, length: object = None, classifier: CharClassifier | None = None
) -> str:
    """See ``RangeOps.substr``."""
    return RangeOps(classifier).substr(text, start, length)


def substring(
    text: str, start: object = None, end: object = None, classifier: CharClassifier | None = None
) -> str:
    """See ``RangeOps.substring``."""
    return RangeOps(classifier).substring(text, start, end)


def char_at(text: str, char_index: object = 0, classifier: CharClassifier | None = None) -> str:
    """See ``RangeOps.char_at``."""
    return RangeOps(classifier).char_at(text, char_index)


def char_code_at(text: str, char_index: object = 0, classifier: CharClassifier | None = None) -> int:
    """See ``RangeOps.char_code_at``."""
    return RangeOps(classifier).char_code_at(text, char_index)


def index_of(
    text: str, needle: str, start: object = 0, classifier: CharClassifier | None = None
) -> int:
    """See ``RangeOps.index_of``."""
    return RangeOps(classifier).index_of(text, needle, start)


def last_index_of(
    text: str, needle: str, start: object = None, classifier: CharClassifier | None = None
) -> int:
    """See ``RangeOps.last_index_of``."""
    return RangeOps(classifier).last_index_of(text, needle, start)


def pad_start(
    text: str,
    target_length: object,
    pad_text: str | None = " ",
    classifier: CharClassifier | None = None,
) -> str:
    """See ``RangeOps.pad_start``."""
    return RangeOps(classifier).pad_start(text, target_length, pad_text)


def pad_end(
    text: str,
    target_length: object,
    pad_text: str | None = " ",
    classifier: CharClassifier | None = None,
) -> str:
    """See ``RangeOps.pad_end``."""
    return RangeOps(classifier).pad_end(text, target_length, pad_text)


def to_char_array(text: str, classifier: CharClassifier | None = None) -> list[str]:
    """See ``RangeOps.to_char_array``."""
    return RangeOps(classifier).to_char_array(text)


def to_code_points(text: str, classifier: CharClassifier | None = None) -> list[int]:
    """See ``RangeOps.to_code_points``."""
    return RangeOps(classifier).to_code_points(text)


from_code_points = RangeOps.from_code_points
to_bytes = RangeOps.to_bytes
from_bytes = RangeOps.from_bytes
