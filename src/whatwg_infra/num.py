"""Fixed-width integer range checks per the Infra Standard.

Each check answers whether a value is an integer representable in a given
bit width. Python integers are unbounded, so the 64-bit and 128-bit checks
need no separate big-integer path.

Accepted values:
    - int (bool is rejected: True is not a number in this sense)
    - float or Decimal holding an integral, finite value (2.0 counts, 0.5 and
      inf do not)

Note: All checks accept any object and return False for non-numbers. They
never raise.

Example:
    >>> is_uint8(255)
    True
    >>> is_uint8(256)
    False
    >>> is_int8(-128.0)
    True
    >>> is_int64(0.5)
    False
"""

from decimal import Decimal

__all__ = [
    "is_int8",
    "is_int16",
    "is_int32",
    "is_int64",
    "is_int128",
    "is_uint8",
    "is_uint16",
    "is_uint32",
    "is_uint64",
    "is_uint128",
]


def _integral_value(value: object) -> int | None:
    """Return value as an int if it is an integral number, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            return None
        return int(value)
    return None


def _fits(value: object, bits: int, *, signed: bool) -> bool:
    n = _integral_value(value)
    if n is None:
        return False
    if signed:
        return -(1 << (bits - 1)) <= n <= (1 << (bits - 1)) - 1
    return 0 <= n <= (1 << bits) - 1


def is_uint8(value: object) -> bool:
    """Check for an integer in [0, 255]."""
    return _fits(value, 8, signed=False)


def is_uint16(value: object) -> bool:
    """Check for an integer in [0, 65535]."""
    return _fits(value, 16, signed=False)


def is_uint32(value: object) -> bool:
    """Check for an integer in [0, 2**32 - 1]."""
    return _fits(value, 32, signed=False)


def is_uint64(value: object) -> bool:
    """Check for an integer in [0, 2**64 - 1]."""
    return _fits(value, 64, signed=False)


def is_uint128(value: object) -> bool:
    """Check for an integer in [0, 2**128 - 1]."""
    return _fits(value, 128, signed=False)


def is_int8(value: object) -> bool:
    """Check for an integer in [-128, 127]."""
    return _fits(value, 8, signed=True)


def is_int16(value: object) -> bool:
    """Check for an integer in [-32768, 32767]."""
    return _fits(value, 16, signed=True)


def is_int32(value: object) -> bool:
    """Check for an integer in [-2**31, 2**31 - 1]."""
    return _fits(value, 32, signed=True)


def is_int64(value: object) -> bool:
    """Check for an integer in [-2**63, 2**63 - 1]."""
    return _fits(value, 64, signed=True)


def is_int128(value: object) -> bool:
    """Check for an integer in [-2**127, 2**127 - 1]."""
    return _fits(value, 128, signed=True)
