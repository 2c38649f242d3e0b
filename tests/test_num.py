"""Tests for fixed-width integer range checks."""

from __future__ import annotations

from decimal import Decimal

import pytest

from whatwg_infra.num import (
    is_int8,
    is_int16,
    is_int32,
    is_int64,
    is_int128,
    is_uint8,
    is_uint16,
    is_uint32,
    is_uint64,
    is_uint128,
)


@pytest.mark.parametrize(
    ("check", "minimum", "maximum"),
    [
        (is_uint8, 0, 2**8 - 1),
        (is_uint16, 0, 2**16 - 1),
        (is_uint32, 0, 2**32 - 1),
        (is_uint64, 0, 2**64 - 1),
        (is_uint128, 0, 2**128 - 1),
        (is_int8, -(2**7), 2**7 - 1),
        (is_int16, -(2**15), 2**15 - 1),
        (is_int32, -(2**31), 2**31 - 1),
        (is_int64, -(2**63), 2**63 - 1),
        (is_int128, -(2**127), 2**127 - 1),
    ],
)
class TestBounds:
    """Test inclusive bounds for every width."""

    def test_bounds_inclusive(self, check, minimum: int, maximum: int) -> None:
        assert check(minimum)
        assert check(maximum)

    def test_just_outside(self, check, minimum: int, maximum: int) -> None:
        assert not check(minimum - 1)
        assert not check(maximum + 1)

    def test_fraction_rejected(self, check, minimum: int, maximum: int) -> None:
        assert not check(0.5)


class TestAcceptedTypes:
    """Test which number types count as integers."""

    def test_integral_float(self) -> None:
        assert is_uint8(255.0)
        assert is_int8(-128.0)

    def test_integral_decimal(self) -> None:
        assert is_uint8(Decimal("255"))
        assert is_uint8(Decimal("2.000"))
        assert not is_uint8(Decimal("2.5"))

    @pytest.mark.parametrize(
        "value", [True, False, None, "1", float("inf"), float("nan"), Decimal("NaN")]
    )
    def test_non_numbers_rejected(self, value: object) -> None:
        assert not is_uint8(value)
        assert not is_int64(value)
