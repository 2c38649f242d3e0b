"""Shared constants for whatwg-infra.

This module provides the named code points and numeric bounds used across
the classifier, cursor, and string algorithm modules. Placing them here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Code space bounds: Limits of the Unicode code space and UTF-16 code units
- Surrogate bounds: Leading/trailing surrogate ranges
- Named code points: Characters the string algorithms insert or remove

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code space bounds
    "MAX_CODE_POINT",
    "MAX_CODE_UNIT",
    "PLANE_SIZE",
    # Surrogate bounds
    "LEADING_SURROGATE_MIN",
    "LEADING_SURROGATE_MAX",
    "TRAILING_SURROGATE_MIN",
    "TRAILING_SURROGATE_MAX",
    "SUPPLEMENTARY_OFFSET",
    # Named code points
    "TAB",
    "LF",
    "FF",
    "CR",
    "SPACE",
    "COMMA",
    "REPLACEMENT_CHARACTER",
]

# ============================================================================
# CODE SPACE BOUNDS
# ============================================================================

# Largest Unicode code point (last code point of plane 16).
MAX_CODE_POINT: int = 0x10FFFF

# Largest UTF-16 code unit.
MAX_CODE_UNIT: int = 0xFFFF

# Code points per plane. The low 16 bits of a code point are its offset
# within the plane.
PLANE_SIZE: int = 0x10000

# ============================================================================
# SURROGATE BOUNDS
# ============================================================================
#
# Surrogates are code points reserved for UTF-16. A leading surrogate
# followed by a trailing surrogate encodes one supplementary code point:
#
#     cp = SUPPLEMENTARY_OFFSET
#          + ((leading - LEADING_SURROGATE_MIN) << 10)
#          + (trailing - TRAILING_SURROGATE_MIN)
#
# ============================================================================

LEADING_SURROGATE_MIN: int = 0xD800
LEADING_SURROGATE_MAX: int = 0xDBFF
TRAILING_SURROGATE_MIN: int = 0xDC00
TRAILING_SURROGATE_MAX: int = 0xDFFF

# First supplementary (non-BMP) code point.
SUPPLEMENTARY_OFFSET: int = 0x10000

# ============================================================================
# NAMED CODE POINTS
# ============================================================================

TAB: str = "\u0009"
LF: str = "\u000a"
FF: str = "\u000c"
CR: str = "\u000d"
SPACE: str = "\u0020"
COMMA: str = ","

# Substituted for surrogates when converting to a scalar value string.
REPLACEMENT_CHARACTER: str = "\ufffd"
