#!/usr/bin/env python3
"""Example: Flags and the visual classifier

Regional-indicator flags are two code points, so the default classifier
counts them as two characters. UtfVisualString treats each flag as one.

Usage:
    python examples/02_visual_flags.py

Requirements:
    pip install utfstring
"""
from __future__ import annotations

from utfstring import UtfString, UtfVisualString, get_classifier, logical_length, to_code_units

ROUTE = "\U0001F1E9\U0001F1EA → \U0001F1EB\U0001F1F7 → \U0001F1EE\U0001F1F9"


def main() -> None:
    # Step 1: The two wrapper classes disagree on length
    print(f"Route: {ROUTE}")
    print(f"UtfString length:       {len(UtfString(ROUTE))}")
    print(f"UtfVisualString length: {len(UtfVisualString(ROUTE))}")

    # Step 2: Character access keeps whole flags together
    visual = UtfVisualString(ROUTE)
    flags = [str(char) for char in visual.to_char_array() if char.strip() and char != "→"]
    print(f"Flags: {' '.join(flags)}")
    print(f"First flag code points: {[hex(cp) for cp in visual[0].to_code_points()]}")

    # Step 3: The same variants through the functional API
    units = to_code_units(ROUTE)
    for name in ("default", "visual"):
        print(f"{name:>8}: {logical_length(units, get_classifier(name))} characters")


if __name__ == "__main__":
    main()
