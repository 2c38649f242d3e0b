"""Tests for the UTF-16 code unit view."""

from __future__ import annotations

import pytest

from whatwg_infra.codeunits import (
    code_unit_length,
    code_units,
    from_code_units,
    is_code_unit_less_than,
    is_code_unit_prefix,
)
from whatwg_infra.errors import CodePointTypeError, CodeUnitRangeError


class TestCodeUnits:
    """Test code point to code unit expansion."""

    @pytest.mark.parametrize(
        ("s", "expected"),
        [
            ("", ()),
            ("a", (0x61,)),
            ("\uffff", (0xFFFF,)),
            ("\U00010000", (0xD800, 0xDC00)),
            ("\U0001f600", (0xD83D, 0xDE00)),
            ("\U0010ffff", (0xDBFF, 0xDFFF)),
            ("\ud800", (0xD800,)),
        ],
    )
    def test_values(self, s: str, expected: tuple[int, ...]) -> None:
        assert code_units(s) == expected

    def test_length_differs_for_supplementary(self) -> None:
        s = "a\U0001f600b"

        assert len(s) == 3
        assert code_unit_length(s) == 4

    def test_length_matches_units(self) -> None:
        s = "x\U00010000\ud800\U0010ffff"

        assert code_unit_length(s) == len(code_units(s))


class TestFromCodeUnits:
    """Test code unit to code point pairing."""

    def test_pairs_surrogates(self) -> None:
        assert from_code_units([0xD83D, 0xDE00]) == "\U0001f600"

    def test_unpaired_leading_surrogate(self) -> None:
        assert from_code_units([0xD83D, 0x61]) == "\ud83da"

    def test_reversed_pair_stays_lone(self) -> None:
        result = from_code_units([0xDE00, 0xD83D])

        assert len(result) == 2
        assert result == "\ude00\ud83d"

    def test_trailing_leading_surrogate_at_end(self) -> None:
        assert from_code_units([0x61, 0xD800]) == "a\ud800"

    def test_empty(self) -> None:
        assert from_code_units([]) == ""

    @pytest.mark.parametrize("unit", [-1, 0x10000])
    def test_out_of_range(self, unit: int) -> None:
        with pytest.raises(CodeUnitRangeError):
            from_code_units([unit])

    def test_rejects_non_int(self) -> None:
        with pytest.raises(CodePointTypeError):
            from_code_units(["a"])  # type: ignore[list-item]


class TestComparisons:
    """Test code unit prefix and ordering."""

    def test_prefix(self) -> None:
        assert is_code_unit_prefix("", "abc")
        assert is_code_unit_prefix("ab", "abc")
        assert is_code_unit_prefix("abc", "abc")
        assert not is_code_unit_prefix("abcd", "abc")
        assert not is_code_unit_prefix("b", "abc")

    def test_prefix_splits_surrogate_pair(self) -> None:
        assert is_code_unit_prefix("\ud83d", "\U0001f600")

    def test_less_than(self) -> None:
        assert is_code_unit_less_than("a", "b")
        assert is_code_unit_less_than("a", "ab")
        assert not is_code_unit_less_than("ab", "a")
        assert not is_code_unit_less_than("a", "a")

    def test_less_than_uses_code_units(self) -> None:
        # Code point order puts U+FF5E first; code unit order puts U+1F600 first
        assert "\uff5e" < "\U0001f600"
        assert is_code_unit_less_than("\U0001f600", "\uff5e")
        assert not is_code_unit_less_than("\uff5e", "\U0001f600")
