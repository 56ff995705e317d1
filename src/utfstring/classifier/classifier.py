"""Character classifiers: which code-unit spans form one logical character.

A classifier is a stateless strategy object built around two
precompiled patterns:

``_multi_unit``
    Matches only the spans longer than one code unit.  Used as the
    cheap "does this text need scanning at all?" check.
``_scanner``
    Matches exactly one logical character at any position: a
    multi-unit span when one starts there, otherwise a single unit.

Two variants ship with the package:

- ``SurrogatePairClassifier`` — a high surrogate immediately followed
  by a low surrogate is one character.
- ``VisualClassifier`` — additionally merges two consecutive regional
  indicators (each itself a surrogate pair) into one flag character.

Unpaired surrogates are never an error; the scanner's single-unit
alternative picks them up as one-unit characters.
"""
from __future__ import annotations

import re
from abc import ABC
from collections.abc import Iterator
from typing import ClassVar, Final

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

SURROGATE_PAIR: Final[str] = "[\ud800-\udbff][\udc00-\udfff]"

# U+1F1E6..U+1F1FF encode as \uD83C followed by \uDDE6..\uDDFF.
REGIONAL_INDICATOR_PAIR: Final[str] = (
    "\ud83c[\udde6-\uddff]\ud83c[\udde6-\uddff]"
)

_SURROGATE_FINDER: Final[re.Pattern[str]] = re.compile(SURROGATE_PAIR)
_SURROGATE_SCANNER: Final[re.Pattern[str]] = re.compile(
    f"{SURROGATE_PAIR}|.", re.DOTALL
)

_VISUAL_FINDER: Final[re.Pattern[str]] = re.compile(
    f"{REGIONAL_INDICATOR_PAIR}|{SURROGATE_PAIR}"
)
_VISUAL_SCANNER: Final[re.Pattern[str]] = re.compile(
    f"{REGIONAL_INDICATOR_PAIR}|{SURROGATE_PAIR}|.", re.DOTALL
)


class CharClassifier(ABC):
    """Base class for logical-character classifiers.

    Subclasses only supply the two class-level patterns; every method
    works on code-unit text (see ``utfstring.units``).
    """

    name: ClassVar[str] = ""
    _multi_unit: ClassVar[re.Pattern[str]]
    _scanner: ClassVar[re.Pattern[str]]

    __slots__ = ()

    def is_multi_unit_span_at(self, text: str, pos: int) -> bool:
        """Return True if a recognized multi-unit span begins at ``pos``."""
        if pos < 0 or pos >= len(text):
            return False
        return self._multi_unit.match(text, pos) is not None

    def span_at(self, text: str, pos: int) -> int:
        """Return the code-unit length of the character starting at ``pos``.

        Returns ``0`` when ``pos`` lies outside the text.
        """
        if pos < 0 or pos >= len(text):
            return 0
        match = self._scanner.match(text, pos)
        return match.end() - pos if match is not None else 1

    def contains_any_multi_unit_char(self, text: str) -> bool:
        """Return True if any multi-unit span occurs anywhere in ``text``."""
        return self._multi_unit.search(text) is not None

    def iter_spans(self, text: str) -> Iterator[tuple[int, int]]:
        """Yield ``(offset, length)`` for every logical character, left to right."""
        for match in self._scanner.finditer(text):
            yield match.start(), match.end() - match.start()

    def iter_chars(self, text: str) -> Iterator[str]:
        """Yield the code units of every logical character, left to right."""
        for match in self._scanner.finditer(text):
            yield match.group()

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SurrogatePairClassifier(CharClassifier):
    """Treats each well-formed surrogate pair as one character."""

    name = "default"
    _multi_unit = _SURROGATE_FINDER
    _scanner = _SURROGATE_SCANNER
    __slots__ = ()


class VisualClassifier(CharClassifier):
    """Treats regional-indicator pairs (flags) and surrogate pairs as one character."""

    name = "visual"
    _multi_unit = _VISUAL_FINDER
    _scanner = _VISUAL_SCANNER
    __slots__ = ()


DEFAULT_CLASSIFIER: Final[CharClassifier] = SurrogatePairClassifier()
VISUAL_CLASSIFIER: Final[CharClassifier] = VisualClassifier()
