"""Code point classification per the WHATWG Infra Standard.

This module is the single source of truth for the code point categories that
markup, URL, and MIME tokenizers branch on. Every predicate takes ONE code
point and answers a yes/no question against a fixed set of inclusive ranges.

Input Forms:
    A code point may be given as:
    - str: only the first code point is considered. Python strings index by
      code point, so an astral character is one element and a lone surrogate
      is also one element. The empty string holds no code point and every
      predicate returns False for it.
    - int: the code point value itself. Values outside [0, 0x10FFFF] belong
      to no category.

    Anything else (including bool) raises CodePointTypeError.

Range Tables:
    Each category is a tuple of inclusive (minimum, maximum) pairs. Ranges
    inside one table never overlap, and composite categories (hex digit,
    alpha, alphanumeric) are built by concatenating the tables of their
    parts, so each category can be tested on its own.

Thread Safety:
    All functions are pure. Range tables are immutable tuples.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from whatwg_infra.constants import (
    LEADING_SURROGATE_MAX,
    LEADING_SURROGATE_MIN,
    MAX_CODE_POINT,
    PLANE_SIZE,
    TRAILING_SURROGATE_MAX,
    TRAILING_SURROGATE_MIN,
)
from whatwg_infra.errors import CodePointRangeError, CodePointTypeError

__all__ = [
    "CodePoint",
    "code_point_value",
    "code_points",
    "from_code_points",
    "is_ascii",
    "is_ascii_alpha",
    "is_ascii_alphanumeric",
    "is_ascii_byte",
    "is_ascii_digit",
    "is_ascii_hex_digit",
    "is_ascii_lower_alpha",
    "is_ascii_lower_hex_digit",
    "is_ascii_tab_or_newline",
    "is_ascii_upper_alpha",
    "is_ascii_upper_hex_digit",
    "is_ascii_whitespace",
    "is_c0_control",
    "is_c0_control_or_space",
    "is_code_point",
    "is_code_point_between",
    "is_control",
    "is_leading_surrogate",
    "is_noncharacter",
    "is_scalar_value",
    "is_surrogate",
    "is_trailing_surrogate",
]

CodePoint: TypeAlias = str | int

_Ranges: TypeAlias = tuple[tuple[int, int], ...]

# ============================================================================
# RANGE TABLES
# ============================================================================

_ASCII: _Ranges = ((0x0000, 0x007F),)
_C0_CONTROL: _Ranges = ((0x0000, 0x001F),)
_C0_CONTROL_OR_SPACE: _Ranges = ((0x0000, 0x001F), (0x0020, 0x0020))
_CONTROL: _Ranges = ((0x0000, 0x001F), (0x007F, 0x009F))

# TAB, LF, CR
_ASCII_TAB_OR_NEWLINE: _Ranges = ((0x0009, 0x000A), (0x000D, 0x000D))

# TAB, LF, FF, CR, SPACE. U+000B VERTICAL TAB is not ASCII whitespace.
_ASCII_WHITESPACE: _Ranges = ((0x0009, 0x000A), (0x000C, 0x000D), (0x0020, 0x0020))

_ASCII_DIGIT: _Ranges = ((0x0030, 0x0039),)
_ASCII_UPPER_HEX_LETTER: _Ranges = ((0x0041, 0x0046),)
_ASCII_LOWER_HEX_LETTER: _Ranges = ((0x0061, 0x0066),)
_ASCII_UPPER_HEX_DIGIT: _Ranges = _ASCII_DIGIT + _ASCII_UPPER_HEX_LETTER
_ASCII_LOWER_HEX_DIGIT: _Ranges = _ASCII_DIGIT + _ASCII_LOWER_HEX_LETTER
_ASCII_HEX_DIGIT: _Ranges = _ASCII_DIGIT + _ASCII_UPPER_HEX_LETTER + _ASCII_LOWER_HEX_LETTER

_ASCII_UPPER_ALPHA: _Ranges = ((0x0041, 0x005A),)
_ASCII_LOWER_ALPHA: _Ranges = ((0x0061, 0x007A),)
_ASCII_ALPHA: _Ranges = _ASCII_UPPER_ALPHA + _ASCII_LOWER_ALPHA
_ASCII_ALPHANUMERIC: _Ranges = _ASCII_DIGIT + _ASCII_ALPHA

_SURROGATE: _Ranges = ((LEADING_SURROGATE_MIN, TRAILING_SURROGATE_MAX),)
_LEADING_SURROGATE: _Ranges = ((LEADING_SURROGATE_MIN, LEADING_SURROGATE_MAX),)
_TRAILING_SURROGATE: _Ranges = ((TRAILING_SURROGATE_MIN, TRAILING_SURROGATE_MAX),)

# Contiguous noncharacter block in the Arabic Presentation Forms-A area.
# The remaining 34 noncharacters are the last two code points of each plane.
_NONCHARACTER_BLOCK: _Ranges = ((0xFDD0, 0xFDEF),)
_PLANE_END_OFFSETS: frozenset[int] = frozenset({PLANE_SIZE - 2, PLANE_SIZE - 1})


# ============================================================================
# INPUT NORMALIZATION
# ============================================================================


def code_point_value(code_point: CodePoint) -> int | None:
    """Return the integer value of a code point argument.

    Args:
        code_point: Single-code-point string, or integer code point

    Returns:
        Integer value of the first code point, or None for the empty string.
        Integers are returned unchanged (no range check).

    Raises:
        CodePointTypeError: If code_point is not a str or int (bool included)

    Example:
        >>> code_point_value("A")
        65
        >>> code_point_value("AB")  # Only the first code point counts
        65
        >>> code_point_value("") is None
        True
        >>> code_point_value(0x1F600)
        128512
    """
    if isinstance(code_point, str):
        return ord(code_point[0]) if code_point else None
    if isinstance(code_point, bool) or not isinstance(code_point, int):
        msg = f"Expected str or int code point, got {type(code_point).__name__}"
        raise CodePointTypeError(msg, code_point)
    return code_point


def _in_ranges(code_point: CodePoint, ranges: _Ranges) -> bool:
    value = code_point_value(code_point)
    if value is None:
        return False
    return any(minimum <= value <= maximum for minimum, maximum in ranges)


def code_points(s: str) -> tuple[int, ...]:
    """Return the code point values of a string, one per element.

    Example:
        >>> code_points("a\\U0001F600")
        (97, 128512)
    """
    return tuple(ord(ch) for ch in s)


def from_code_points(values: Iterable[int]) -> str:
    """Build a string from integer code points.

    Surrogate values are allowed and become lone surrogates in the result.

    Args:
        values: Integer code points in [0, 0x10FFFF]

    Returns:
        String holding exactly one element per input value

    Raises:
        CodePointTypeError: If a value is not an int (bool included)
        CodePointRangeError: If a value is outside [0, 0x10FFFF]

    Example:
        >>> from_code_points([0x63, 0x61, 0x74])
        'cat'
    """
    chars: list[str] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"Expected int code point, got {type(value).__name__}"
            raise CodePointTypeError(msg, value)
        if not 0 <= value <= MAX_CODE_POINT:
            msg = f"Code point {value:#x} outside [0x0, {MAX_CODE_POINT:#x}]"
            raise CodePointRangeError(msg, value)
        chars.append(chr(value))
    return "".join(chars)


# ============================================================================
# GENERIC RANGE TEST
# ============================================================================


def is_code_point_between(code_point: CodePoint, minimum: int, maximum: int) -> bool:
    """Check if a code point lies in [minimum, maximum], both ends inclusive.

    Args:
        code_point: Code point to test
        minimum: Lowest accepted value
        maximum: Highest accepted value

    Returns:
        True if minimum <= code_point <= maximum. Always False for the empty
        string, which holds no code point.

    Example:
        >>> is_code_point_between("\\x20", 0x00, 0x20)
        True
        >>> is_code_point_between("\\x7f", 0x00, 0x20)
        False
        >>> is_code_point_between("", 0x00, 0x20)
        False
    """
    value = code_point_value(code_point)
    if value is None:
        return False
    return minimum <= value <= maximum


def is_code_point(code_point: CodePoint) -> bool:
    """Check if the value lies within the Unicode code space [0, 0x10FFFF]."""
    return is_code_point_between(code_point, 0, MAX_CODE_POINT)


# ============================================================================
# ASCII AND CONTROL CATEGORIES
# ============================================================================


def is_ascii(code_point: CodePoint) -> bool:
    """Check for an ASCII code point (U+0000 NULL to U+007F DELETE)."""
    return _in_ranges(code_point, _ASCII)


def is_ascii_byte(code_point: CodePoint) -> bool:
    """Check for an ASCII byte value (0x00 to 0x7F).

    Same range as is_ascii(); integers are the natural input here since the
    Infra Standard defines ASCII bytes as byte values.
    """
    return _in_ranges(code_point, _ASCII)


def is_c0_control(code_point: CodePoint) -> bool:
    """Check for a C0 control (U+0000 NULL to U+001F INFORMATION SEPARATOR ONE)."""
    return _in_ranges(code_point, _C0_CONTROL)


def is_c0_control_or_space(code_point: CodePoint) -> bool:
    """Check for a C0 control or U+0020 SPACE."""
    return _in_ranges(code_point, _C0_CONTROL_OR_SPACE)


def is_control(code_point: CodePoint) -> bool:
    """Check for a C0 control or a code point in U+007F DELETE to U+009F."""
    return _in_ranges(code_point, _CONTROL)


def is_ascii_tab_or_newline(code_point: CodePoint) -> bool:
    """Check for U+0009 TAB, U+000A LF, or U+000D CR."""
    return _in_ranges(code_point, _ASCII_TAB_OR_NEWLINE)


def is_ascii_whitespace(code_point: CodePoint) -> bool:
    """Check for ASCII whitespace: TAB, LF, FF, CR, or SPACE.

    Narrower than str.isspace(): U+000B VERTICAL TAB, U+00A0 NO-BREAK SPACE,
    and the Unicode space separators are NOT ASCII whitespace.

    Example:
        >>> is_ascii_whitespace("\\t")
        True
        >>> is_ascii_whitespace("\\x0b")
        False
        >>> "\\x0b".isspace()
        True
    """
    return _in_ranges(code_point, _ASCII_WHITESPACE)


# ============================================================================
# ASCII DIGITS AND LETTERS
# ============================================================================


def is_ascii_digit(code_point: CodePoint) -> bool:
    """Check for U+0030 (0) to U+0039 (9).

    Unlike str.isdigit(), other Unicode digits (e.g. U+0663) are rejected.
    """
    return _in_ranges(code_point, _ASCII_DIGIT)


def is_ascii_upper_hex_digit(code_point: CodePoint) -> bool:
    """Check for an ASCII digit or U+0041 (A) to U+0046 (F)."""
    return _in_ranges(code_point, _ASCII_UPPER_HEX_DIGIT)


def is_ascii_lower_hex_digit(code_point: CodePoint) -> bool:
    """Check for an ASCII digit or U+0061 (a) to U+0066 (f)."""
    return _in_ranges(code_point, _ASCII_LOWER_HEX_DIGIT)


def is_ascii_hex_digit(code_point: CodePoint) -> bool:
    """Check for an ASCII upper hex digit or ASCII lower hex digit."""
    return _in_ranges(code_point, _ASCII_HEX_DIGIT)


def is_ascii_upper_alpha(code_point: CodePoint) -> bool:
    """Check for U+0041 (A) to U+005A (Z)."""
    return _in_ranges(code_point, _ASCII_UPPER_ALPHA)


def is_ascii_lower_alpha(code_point: CodePoint) -> bool:
    """Check for U+0061 (a) to U+007A (z)."""
    return _in_ranges(code_point, _ASCII_LOWER_ALPHA)


def is_ascii_alpha(code_point: CodePoint) -> bool:
    """Check for an ASCII upper alpha or ASCII lower alpha.

    Unlike str.isalpha(), letters outside ASCII ('é', 'ß') are rejected.
    """
    return _in_ranges(code_point, _ASCII_ALPHA)


def is_ascii_alphanumeric(code_point: CodePoint) -> bool:
    """Check for an ASCII digit or ASCII alpha."""
    return _in_ranges(code_point, _ASCII_ALPHANUMERIC)


# ============================================================================
# SURROGATES, SCALAR VALUES, NONCHARACTERS
# ============================================================================


def is_surrogate(code_point: CodePoint) -> bool:
    """Check for a surrogate (U+D800 to U+DFFF)."""
    return _in_ranges(code_point, _SURROGATE)


def is_leading_surrogate(code_point: CodePoint) -> bool:
    """Check for a leading (high) surrogate (U+D800 to U+DBFF)."""
    return _in_ranges(code_point, _LEADING_SURROGATE)


def is_trailing_surrogate(code_point: CodePoint) -> bool:
    """Check for a trailing (low) surrogate (U+DC00 to U+DFFF)."""
    return _in_ranges(code_point, _TRAILING_SURROGATE)


def is_scalar_value(code_point: CodePoint) -> bool:
    """Check for a scalar value: a code point that is not a surrogate.

    Args:
        code_point: Code point to test

    Returns:
        True if the value is in [0, 0x10FFFF] and outside U+D800 to U+DFFF.
        False for the empty string and for integers outside the code space.

    Example:
        >>> is_scalar_value("\\ud7ff")
        True
        >>> is_scalar_value("\\ud800")
        False
        >>> is_scalar_value(0x110000)
        False
    """
    value = code_point_value(code_point)
    if value is None or not 0 <= value <= MAX_CODE_POINT:
        return False
    return not _in_ranges(value, _SURROGATE)


def is_noncharacter(code_point: CodePoint) -> bool:
    """Check for a noncharacter.

    Noncharacters are U+FDD0 to U+FDEF, plus the last two code points of
    each of the 17 planes: U+FFFE, U+FFFF, U+1FFFE, U+1FFFF, ...,
    U+10FFFE, U+10FFFF.

    Args:
        code_point: Code point to test

    Returns:
        True if the code point is one of the 66 noncharacters

    Example:
        >>> is_noncharacter("\\ufdd0")
        True
        >>> is_noncharacter(0x4FFFE)
        True
        >>> is_noncharacter(0xFFFD)
        False
    """
    value = code_point_value(code_point)
    if value is None or not 0 <= value <= MAX_CODE_POINT:
        return False
    if _in_ranges(value, _NONCHARACTER_BLOCK):
        return True
    return value % PLANE_SIZE in _PLANE_END_OFFSETS
