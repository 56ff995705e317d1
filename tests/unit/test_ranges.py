"""Unit tests for utfstring.ops.ranges — slicing, search, padding and code points."""
from __future__ import annotations

import logging
import math

import pytest

from utfstring.classifier.classifier import VISUAL_CLASSIFIER, CharClassifier
from utfstring.errors import InvalidCodePointError
from utfstring.ops import (
    RangeOps,
    char_at,
    char_code_at,
    from_bytes,
    from_code_points,
    index_of,
    last_index_of,
    pad_end,
    pad_start,
    slice as slice_text,
    substr,
    substring,
    to_bytes,
    to_char_array,
    to_code_points,
)

SMILE = "\ud83d\ude42"
GRIN = "\ud83d\ude00"
REGIONAL_D = "\ud83c\udde9"
REGIONAL_E = "\ud83c\uddea"
REGIONAL_F = "\ud83c\uddeb"
FLAG_DE = REGIONAL_D + REGIONAL_E

TEXT = "a" + SMILE + "b"
REPEATED = SMILE + "x" + SMILE + "x"

SAMPLES = [
    "",
    "abc",
    TEXT,
    REPEATED,
    SMILE + GRIN,
    FLAG_DE + "x",
    "x" + FLAG_DE + FLAG_DE,
    "\ude42" + SMILE + "\ud83d",
]


# ---------------------------------------------------------------------------
# slice
# ---------------------------------------------------------------------------


class TestSlice:
    @pytest.mark.parametrize("start, end, expected", [
        (0, 3, TEXT),
        (1, 2, SMILE),
        (-1, None, "b"),
        (-2, None, SMILE + "b"),
        (2, 1, ""),
        (-10, None, TEXT),
        (0, -1, "a" + SMILE),
        (5, None, ""),
        (None, None, TEXT),
        (1.7, 2.2, SMILE),
        (0, math.inf, TEXT),
        (-math.inf, None, TEXT),
    ])
    def test_bounds(self, start: object, end: object, expected: str) -> None:
        assert slice_text(TEXT, start, end) == expected

    def test_nan_start_means_zero(self) -> None:
        assert slice_text(TEXT, math.nan, 2) == "a" + SMILE

    def test_nan_end_means_to_the_end(self) -> None:
        assert slice_text(TEXT, 1, math.nan) == SMILE + "b"

    def test_non_numeric_bounds(self) -> None:
        assert slice_text(TEXT, "x", "y") == TEXT

    def test_never_splits_a_pair(self) -> None:
        for start in range(4):
            for end in range(4):
                piece = slice_text(TEXT, start, end)
                assert not piece.startswith("\ude42")
                assert not piece.endswith("\ud83d")

    def test_visual_slice_keeps_flag_whole(self) -> None:
        assert slice_text(FLAG_DE + "x", 0, 1, VISUAL_CLASSIFIER) == FLAG_DE
        assert slice_text(FLAG_DE + "x", 1, None, VISUAL_CLASSIFIER) == "x"

    def test_slice_of_slice(self) -> None:
        assert slice_text(slice_text(REPEATED, 1), 1) == slice_text(REPEATED, 2)


# ---------------------------------------------------------------------------
# substr / substring
# ---------------------------------------------------------------------------


class TestSubstr:
    @pytest.mark.parametrize("start, length, expected", [
        (-1, 1, "b"),
        (1, 1, SMILE),
        (1, None, SMILE + "b"),
        (0, 0, ""),
        (0, -1, ""),
        (-10, 2, "a" + SMILE),
        (None, 2, "a" + SMILE),
        (2, 100, "b"),
        (3, 1, ""),
    ])
    def test_substr(self, start: object, length: object, expected: str) -> None:
        assert substr(TEXT, start, length) == expected

    def test_nan_length_is_empty(self) -> None:
        assert substr(TEXT, 0, math.nan) == ""

    def test_non_numeric_length_is_empty(self) -> None:
        assert substr(TEXT, 0, "abc") == ""

    def test_last_flag_in_visual(self) -> None:
        assert substr("x" + FLAG_DE, -1, 1, VISUAL_CLASSIFIER) == FLAG_DE


class TestSubstring:
    @pytest.mark.parametrize("start, end, expected", [
        (0, 3, TEXT),
        (2, 0, "a" + SMILE),
        (-5, 1, "a"),
        (1, None, SMILE + "b"),
        (1, 100, SMILE + "b"),
        (5, 1, SMILE + "b"),
        (None, 1, "a"),
        (1, 1, ""),
    ])
    def test_substring(self, start: object, end: object, expected: str) -> None:
        assert substring(TEXT, start, end) == expected

    def test_nan_start(self) -> None:
        assert substring(TEXT, math.nan, 2) == "a" + SMILE

    def test_nan_end_is_zero(self) -> None:
        assert substring(TEXT, 1, math.nan) == "a"


# ---------------------------------------------------------------------------
# char_at / char_code_at / to_char_array
# ---------------------------------------------------------------------------


class TestCharAt:
    @pytest.mark.parametrize("index, expected", [
        (0, "a"),
        (1, SMILE),
        (2, "b"),
        (3, ""),
        (-1, ""),
    ])
    def test_char_at(self, index: int, expected: str) -> None:
        assert char_at(TEXT, index) == expected

    @pytest.mark.parametrize("index, expected", [
        (None, "a"),
        (math.nan, "a"),
        ("1", "a"),
        (1.5, SMILE),
        (2.9, "b"),
        (math.inf, ""),
        (-math.inf, ""),
    ])
    def test_malformed_index_is_normalized(self, index: object, expected: str) -> None:
        assert char_at(TEXT, index) == expected

    @pytest.mark.parametrize("index", [None, math.nan, "1", 0.5])
    def test_char_code_at_malformed_index(self, index: object) -> None:
        assert char_code_at("a" + SMILE, index) == 0x61

    def test_char_code_at_fractional_index(self) -> None:
        assert char_code_at("a" + SMILE, 1.5) == 0x1F642

    def test_visual_flag(self) -> None:
        assert char_at(FLAG_DE + "x", 0, VISUAL_CLASSIFIER) == FLAG_DE
        assert char_at(FLAG_DE + "x", 0) == REGIONAL_D

    def test_char_code_at(self) -> None:
        assert char_code_at(TEXT, 0) == 0x61
        assert char_code_at(TEXT, 1) == 0x1F642
        assert char_code_at(TEXT, 3) == -1

    def test_char_code_at_lone_surrogate(self) -> None:
        assert char_code_at("\ud83d", 0) == 0xD83D

    def test_char_code_at_visual_flag_is_first_indicator(self) -> None:
        assert char_code_at(FLAG_DE, 0, VISUAL_CLASSIFIER) == 0x1F1E9

    def test_to_char_array(self) -> None:
        assert to_char_array(TEXT) == ["a", SMILE, "b"]
        assert to_char_array(FLAG_DE + "x", VISUAL_CLASSIFIER) == [FLAG_DE, "x"]
        assert to_char_array("") == []


# ---------------------------------------------------------------------------
# index_of / last_index_of / includes
# ---------------------------------------------------------------------------


class TestSearch:
    def test_index_is_logical(self) -> None:
        assert index_of(TEXT, "b") == 2

    @pytest.mark.parametrize("needle, start, expected", [
        (SMILE, 0, 1),
        ("a", 1, -1),
        ("z", 0, -1),
        ("b", -5, 2),
        ("b", 3, -1),
        ("", 1, 1),
    ])
    def test_index_of(self, needle: str, start: int, expected: int) -> None:
        assert index_of(TEXT, needle, start) == expected

    def test_index_of_empty_text(self) -> None:
        assert index_of("", "") == -1

    def test_index_of_from_start(self) -> None:
        assert index_of(REPEATED, "x") == 1
        assert index_of(REPEATED, "x", 2) == 3

    @pytest.mark.parametrize("needle, start, expected", [
        ("x", None, 3),
        ("x", 2, 1),
        (SMILE, 1, 0),
        (SMILE, 2, 2),
        ("x", 4, -1),
        ("z", None, -1),
        ("", None, 4),
    ])
    def test_last_index_of(self, needle: str, start: int | None, expected: int) -> None:
        assert last_index_of(REPEATED, needle, start) == expected

    def test_last_index_of_empty_text(self) -> None:
        assert last_index_of("", "") == 0

    def test_includes(self) -> None:
        ops = RangeOps()
        assert ops.includes(TEXT, SMILE)
        assert not ops.includes(TEXT, "a", 1)

    def test_visual_search(self) -> None:
        text = FLAG_DE + "x" + FLAG_DE
        assert index_of(text, "x", 0, VISUAL_CLASSIFIER) == 1
        assert last_index_of(text, FLAG_DE, None, VISUAL_CLASSIFIER) == 2

    def test_search_then_slice(self) -> None:
        position = index_of(REPEATED, "x", 2)
        assert slice_text(REPEATED, position) == "x"


# ---------------------------------------------------------------------------
# pad_start / pad_end
# ---------------------------------------------------------------------------


class TestPadding:
    def test_pad_start_cycles_pad_text(self) -> None:
        assert pad_start("x", 3, "ab") == "abx"

    def test_pad_end_cycles_pad_text(self) -> None:
        assert pad_end("x", 3, "ab") == "xab"

    def test_pad_wraps_around(self) -> None:
        assert pad_start("x", 4, "ab") == "abax"

    def test_pad_with_emoji(self) -> None:
        padded = pad_start("x", 3, SMILE)
        assert padded == SMILE + SMILE + "x"
        assert RangeOps().mapper.logical_length(padded) == 3

    def test_pad_text_mixing_pairs_and_ascii(self) -> None:
        assert pad_end("x", 4, "a" + SMILE) == "xa" + SMILE + "a"

    def test_default_pad_is_space(self) -> None:
        assert pad_start("x", 2) == " x"
        assert pad_end("x", 3, None) == "x  "

    def test_target_not_above_length(self) -> None:
        assert pad_end("abc", 2, "-") == "abc"
        assert pad_start(TEXT, 3, "-") == TEXT

    def test_target_counts_logical_characters(self) -> None:
        assert pad_start(TEXT, 4, "-") == "-" + TEXT

    def test_empty_pad_text_leaves_text(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="utfstring.ops.ranges"):
            assert pad_start("x", 5, "") == "x"
        assert "Empty pad text" in caplog.text

    def test_non_numeric_target(self) -> None:
        assert pad_start("x", math.nan, "a") == "x"
        assert pad_end("x", "5", "a") == "x"

    @pytest.mark.parametrize("target", [math.inf, -math.inf])
    def test_infinite_target_leaves_text(self, target: float) -> None:
        assert pad_start("x", target, "a") == "x"
        assert pad_end("x", target, "a") == "x"

    def test_visual_seam_merge_is_topped_up(self) -> None:
        padded = pad_end(REGIONAL_D, 2, REGIONAL_F, VISUAL_CLASSIFIER)
        assert padded == REGIONAL_D + REGIONAL_F + REGIONAL_F
        assert RangeOps(VISUAL_CLASSIFIER).mapper.logical_length(padded) == 2

    def test_visual_flag_pad(self) -> None:
        assert pad_start("x", 3, FLAG_DE, VISUAL_CLASSIFIER) == FLAG_DE + FLAG_DE + "x"


# ---------------------------------------------------------------------------
# Code points and bytes
# ---------------------------------------------------------------------------


class TestCodePoints:
    def test_to_code_points(self) -> None:
        assert to_code_points(TEXT) == [0x61, 0x1F642, 0x62]

    def test_visual_flag_yields_both_indicators(self) -> None:
        assert to_code_points(FLAG_DE + "x", VISUAL_CLASSIFIER) == [0x1F1E9, 0x1F1EA, 0x78]

    def test_nul_does_not_stop_the_walk(self) -> None:
        assert to_code_points("a\x00b") == [0x61, 0x00, 0x62]

    def test_from_code_points(self) -> None:
        assert from_code_points([0x61, 0x1F642, 0x62]) == TEXT

    def test_from_code_points_accepts_generator(self) -> None:
        assert from_code_points(cp for cp in (0x78,)) == "x"

    def test_invalid_code_point_reports_position(self) -> None:
        with pytest.raises(InvalidCodePointError) as exc_info:
            from_code_points([0x61, 0x110000])
        assert exc_info.value.position == 1

    def test_bytes(self) -> None:
        assert to_bytes(TEXT) == bytes([0x00, 0x61, 0xD8, 0x3D, 0xDE, 0x42, 0x00, 0x62])
        assert from_bytes(to_bytes(TEXT)) == TEXT


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text", SAMPLES)
def test_full_slice_is_identity(text: str, classifier: CharClassifier) -> None:
    ops = RangeOps(classifier)
    assert ops.slice(text, 0, ops.mapper.logical_length(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_char_at_reconstructs_text(text: str, classifier: CharClassifier) -> None:
    ops = RangeOps(classifier)
    length = ops.mapper.logical_length(text)
    assert "".join(ops.char_at(text, i) for i in range(length)) == text


@pytest.mark.parametrize("text", SAMPLES[:-1])
def test_code_points_round_trip(text: str, classifier: CharClassifier) -> None:
    ops = RangeOps(classifier)
    assert ops.from_code_points(ops.to_code_points(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_substr_matches_char_at(text: str, classifier: CharClassifier) -> None:
    ops = RangeOps(classifier)
    for i in range(ops.mapper.logical_length(text)):
        assert ops.substr(text, i, 1) == ops.char_at(text, i)


def test_range_ops_repr() -> None:
    assert repr(RangeOps(VISUAL_CLASSIFIER)) == "RangeOps(classifier=VisualClassifier())"
