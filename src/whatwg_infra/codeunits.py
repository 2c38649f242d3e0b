"""UTF-16 code unit view of code point strings.

A few Infra Standard algorithms (string length, code unit prefix, code unit
less than) are defined on UTF-16 code units rather than code points. Python
strings index by code point, so this module makes the code unit view
explicit instead of letting it leak into the code point algorithms.

Mapping:
    - A code point up to U+FFFF is one code unit with the same value,
      including a lone surrogate.
    - A code point above U+FFFF is two code units: a leading surrogate
      followed by a trailing surrogate.

    Converting back pairs a leading surrogate unit with an immediately
    following trailing surrogate unit. Any other surrogate unit stays a lone
    surrogate code point.

No byte encoding is involved: code units are plain integers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

from whatwg_infra.codepoints import is_leading_surrogate, is_trailing_surrogate
from whatwg_infra.constants import (
    LEADING_SURROGATE_MIN,
    MAX_CODE_UNIT,
    SUPPLEMENTARY_OFFSET,
    TRAILING_SURROGATE_MIN,
)
from whatwg_infra.errors import CodePointTypeError, CodeUnitRangeError

__all__ = [
    "code_unit_length",
    "code_units",
    "from_code_units",
    "is_code_unit_less_than",
    "is_code_unit_prefix",
]


def code_units(s: str) -> tuple[int, ...]:
    """Return the UTF-16 code units of s.

    Example:
        >>> code_units("a\\U0001F600")
        (97, 55357, 56832)
        >>> code_units("\\ud800")  # Lone surrogate stays one unit
        (55296,)
    """
    units: list[int] = []
    for ch in s:
        value = ord(ch)
        if value < SUPPLEMENTARY_OFFSET:
            units.append(value)
        else:
            offset = value - SUPPLEMENTARY_OFFSET
            units.append(LEADING_SURROGATE_MIN + (offset >> 10))
            units.append(TRAILING_SURROGATE_MIN + (offset & 0x3FF))
    return tuple(units)


def code_unit_length(s: str) -> int:
    """Return the length of s in UTF-16 code units.

    Differs from len(s) by one for every code point above U+FFFF.
    """
    return sum(2 if ord(ch) >= SUPPLEMENTARY_OFFSET else 1 for ch in s)


def from_code_units(units: Iterable[int]) -> str:
    """Build a code point string from UTF-16 code units.

    Args:
        units: Integers in [0, 0xFFFF]

    Returns:
        String in which every well-formed surrogate pair became one
        supplementary code point and every unpaired surrogate stayed a lone
        surrogate.

    Raises:
        CodePointTypeError: If a unit is not an int (bool included)
        CodeUnitRangeError: If a unit is outside [0, 0xFFFF]

    Example:
        >>> from_code_units([0xD83D, 0xDE00]) == "\\U0001F600"
        True
        >>> from_code_units([0xDE00, 0xD83D]) == "\\ude00\\ud83d"
        True
    """
    values = list(units)
    for unit in values:
        if isinstance(unit, bool) or not isinstance(unit, int):
            msg = f"Expected int code unit, got {type(unit).__name__}"
            raise CodePointTypeError(msg, unit)
        if not 0 <= unit <= MAX_CODE_UNIT:
            msg = f"Code unit {unit:#x} outside [0x0, {MAX_CODE_UNIT:#x}]"
            raise CodeUnitRangeError(msg, unit)

    chars: list[str] = []
    index = 0
    count = len(values)
    while index < count:
        unit = values[index]
        if (
            is_leading_surrogate(unit)
            and index + 1 < count
            and is_trailing_surrogate(values[index + 1])
        ):
            trailing = values[index + 1]
            chars.append(
                chr(
                    SUPPLEMENTARY_OFFSET
                    + ((unit - LEADING_SURROGATE_MIN) << 10)
                    + (trailing - TRAILING_SURROGATE_MIN)
                )
            )
            index += 2
            continue
        chars.append(chr(unit))
        index += 1
    return "".join(chars)


def is_code_unit_prefix(potential_prefix: str, s: str) -> bool:
    """Check if potential_prefix is a code unit prefix of s.

    Example:
        >>> is_code_unit_prefix("\\ud83d", "\\U0001F600")
        True
        >>> "\\U0001F600".startswith("\\ud83d")
        False
    """
    prefix_units = code_units(potential_prefix)
    units = code_units(s)
    return units[: len(prefix_units)] == prefix_units


def is_code_unit_less_than(a: str, b: str) -> bool:
    """Check if a sorts before b by UTF-16 code units.

    A proper prefix sorts first; otherwise the first differing code unit
    decides. This is the ordering of JavaScript string comparison and differs
    from Python's code point ordering for supplementary characters:

    Example:
        >>> is_code_unit_less_than("\\U0001F600", "\\uff5e")
        True
        >>> "\\U0001F600" < "\\uff5e"
        False
    """
    # Tuple comparison is lexicographic with a proper prefix ordered first
    return code_units(a) < code_units(b)
