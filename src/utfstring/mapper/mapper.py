"""Index mapping between logical characters and UTF-16 code units.

Both directions share the same strategy:

1. Normalize the index: fractional values truncate toward zero and
   non-numbers (``None``, NaN, strings) answer ``-1``.  Reject indices
   outside the text with the same ``-1`` sentinel.
2. Fast exit: when the classifier finds no multi-unit span anywhere in
   the text, every character is one code unit and the index maps to
   itself.
3. Otherwise walk the logical characters left to right with the
   classifier's scanner, counting characters and code units until the
   target is reached.

Mapping is O(1) beyond the single O(n) search for text without
multi-unit spans and O(index) for text with them.  ``-1`` uniformly
means "beyond the end of the sequence"; no operation here raises for
an out-of-range index.
"""
from __future__ import annotations

from utfstring.classifier.classifier import DEFAULT_CLASSIFIER, CharClassifier
from utfstring.numeric import is_number, to_integer


class IndexMapper:
    """Converts between character indices and code-unit indices.

    Parameters
    ----------
    classifier:
        Strategy deciding which code-unit spans form one logical
        character.  Defaults to the surrogate-pair classifier.
    """

    __slots__ = ("_classifier",)

    def __init__(self, classifier: CharClassifier | None = None) -> None:
        self._classifier: CharClassifier = classifier or DEFAULT_CLASSIFIER

    @property
    def classifier(self) -> CharClassifier:
        """The classifier this mapper scans with."""
        return self._classifier

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def char_index_to_code_unit_index(self, text: str, char_index: object) -> int:
        """Return the code-unit offset at which the ``char_index``-th character starts.

        Returns
        -------
        int
            The offset, or ``-1`` if ``char_index`` is negative or not
            below the logical length of ``text``.
        """
        if not is_number(char_index):
            return -1
        char_index = to_integer(char_index)  # type: ignore[arg-type]
        if char_index < 0 or char_index >= len(text):
            return -1
        if not self._classifier.contains_any_multi_unit_char(text):
            return char_index
        for count, (offset, _length) in enumerate(self._classifier.iter_spans(text)):
            if count == char_index:
                return offset
        return -1

    def code_unit_index_to_char_index(self, text: str, code_unit_index: object) -> int:
        """Return the index of the character covering code unit ``code_unit_index``.

        A unit in the middle of a multi-unit span maps to that span's
        character.  Returns ``-1`` if ``code_unit_index`` lies outside
        the text.
        """
        if not is_number(code_unit_index):
            return -1
        code_unit_index = to_integer(code_unit_index)  # type: ignore[arg-type]
        if code_unit_index < 0 or code_unit_index >= len(text):
            return -1
        if not self._classifier.contains_any_multi_unit_char(text):
            return code_unit_index
        char_count = 0
        for offset, length in self._classifier.iter_spans(text):
            if offset + length > code_unit_index:
                break
            char_count += 1
        return char_count

    def logical_length(self, text: str) -> int:
        """Return the number of logical characters in ``text``."""
        # -1 for the empty text, so the empty text has length 0
        return self.code_unit_index_to_char_index(text, len(text) - 1) + 1

    def __repr__(self) -> str:
        return f"IndexMapper(classifier={self._classifier!r})"


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def char_index_to_code_unit_index(
    text: str, char_index: object, classifier: CharClassifier | None = None
) -> int:
    """Map a character index to a code-unit index (``-1`` when out of range)."""
    return IndexMapper(classifier).char_index_to_code_unit_index(text, char_index)


def code_unit_index_to_char_index(
    text: str, code_unit_index: object, classifier: CharClassifier | None = None
) -> int:
    """Map a code-unit index to a character index (``-1`` when out of range)."""
    return IndexMapper(classifier).code_unit_index_to_char_index(text, code_unit_index)


def logical_length(text: str, classifier: CharClassifier | None = None) -> int:
    """Return the number of logical characters in ``text``."""
    return IndexMapper(classifier).logical_length(text)
