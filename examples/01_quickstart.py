#!/usr/bin/env python3
"""Example: Quickstart — utfstring

Minimal working example: measure, index, slice and pad a string that
contains emoji, where every emoji counts as one character.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install utfstring
"""
from __future__ import annotations

import utfstring
from utfstring import UtfString

GREETING = "Hi \U0001F44B, welcome to \U0001F30D!"


def main() -> None:
    print(f"utfstring version: {utfstring.__version__}")

    # Step 1: Compare natural, logical and code-unit lengths
    text = UtfString(GREETING)
    print(f"Text: {text}")
    print(f"len(str): {len(GREETING)}, logical: {len(text)}, "
          f"code units: {len(text.code_units)}")

    # Step 2: Index by logical character
    wave = text.index_of("\U0001F44B")
    print(f"Wave emoji at character {wave}: {text[wave]}")
    print(f"Code point at {wave}: U+{text.char_code_at(wave):X}")

    # Step 3: Slice without splitting a surrogate pair
    print(f"Last two characters: {text.slice(-2)}")
    print(f"Characters 3..5: {text.substring(3, 5)}")

    # Step 4: Pad with emoji to a logical width
    for label in ("ok", "\U0001F525"):
        print(f"[{UtfString(label).pad_end(4, '.')}]")


if __name__ == "__main__":
    main()
