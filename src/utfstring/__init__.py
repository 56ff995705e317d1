"""utfstring — logical-character indexing over UTF-16 text.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import utfstring

    text = utfstring.UtfString("a🙂b")
    len(text)                       # 3
    str(text.char_at(1))            # "🙂"
    text.index_of("b")              # 2

    # Regional-indicator flags count as one character in the visual variant
    len(utfstring.UtfVisualString("🇩🇪x"))   # 2

    # The functional core works on code-unit text
    units = utfstring.to_code_units("a🙂b")
    utfstring.char_index_to_code_unit_index(units, 2)   # 3

    utfstring.__version__
    '0.1.0'
"""
from __future__ import annotations

from utfstring.classifier.registry import get_classifier
from utfstring.mapper.mapper import (
    char_index_to_code_unit_index,
    code_unit_index_to_char_index,
    logical_length,
)
from utfstring.strings import UtfString, UtfVisualString
from utfstring.units.codec import from_code_units, to_code_units

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    "UtfString",
    "UtfVisualString",
    "to_code_units",
    "from_code_units",
    "get_classifier",
    "char_index_to_code_unit_index",
    "code_unit_index_to_char_index",
    "logical_length",
]
