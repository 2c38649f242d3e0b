"""String algorithms per the WHATWG Infra Standard.

Every algorithm walks its input by code point and delegates each yes/no
decision to a predicate from whatwg_infra.codepoints. Inputs are never
mutated; transformations return new strings.

Traversal:
    All operations here iterate by code point (Python str elements). A
    supplementary character is ONE step and a lone surrogate is ONE step.
    UTF-16 code unit semantics are only available from whatwg_infra.codeunits.

Positions:
    Scanning operations take and return a position variable: a code point
    index into the input. A position at or past the end of the input is valid
    and turns the scan into a no-op. A negative position raises PositionError.

Failure Semantics:
    All operations are total over strings, including the empty string.
    Malformed content such as lone surrogates is data, not an error.

Thread Safety:
    All functions are pure. Translation tables are built once at import and
    never mutated.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

from whatwg_infra.codepoints import (
    is_ascii,
    is_ascii_whitespace,
    is_code_point_between,
    is_scalar_value,
    is_surrogate,
)
from whatwg_infra.constants import COMMA, CR, LF, REPLACEMENT_CHARACTER, SPACE
from whatwg_infra.cursor import Cursor
from whatwg_infra.errors import PositionError

__all__ = [
    "ascii_lowercase",
    "ascii_uppercase",
    "collect_code_points",
    "convert_to_scalar_value_string",
    "is_ascii_case_insensitive_match",
    "is_ascii_string",
    "is_isomorphic_string",
    "is_scalar_value_string",
    "normalize_newlines",
    "skip_ascii_whitespace",
    "split_on_ascii_whitespace",
    "split_on_commas",
    "strictly_split",
    "string_matches",
    "strip_and_collapse_ascii_whitespace",
    "strip_leading_and_trailing_ascii_whitespace",
    "strip_newlines",
]

logger = logging.getLogger(__name__)

Predicate: TypeAlias = Callable[[str], bool]

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"

# str.lower()/str.upper() also map non-ASCII letters ('Ä' -> 'ä', 'ß' -> 'SS').
# These tables touch A-Z / a-z only.
_TO_ASCII_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_TO_ASCII_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)


def _is_not_ascii_whitespace(ch: str) -> bool:
    return not is_ascii_whitespace(ch)


def _start_cursor(s: str, position: int) -> Cursor:
    if position < 0:
        msg = f"Position must be non-negative, got {position}"
        raise PositionError(msg, position)
    return Cursor(s, position)


# ============================================================================
# PREDICATE MATCHING
# ============================================================================


def string_matches(s: str, predicate: Predicate) -> bool:
    """Check if every code point of s satisfies predicate.

    Vacuously True for the empty string. Stops at the first failing code
    point.

    Example:
        >>> string_matches("bbbb", lambda ch: ch == "b")
        True
        >>> string_matches("bbba", lambda ch: ch == "b")
        False
    """
    return all(predicate(ch) for ch in s)


def is_ascii_string(s: str) -> bool:
    """Check if every code point of s is an ASCII code point."""
    return string_matches(s, is_ascii)


def _is_isomorphic_code_point(ch: str) -> bool:
    return is_code_point_between(ch, 0x0000, 0x00FF)


def is_isomorphic_string(s: str) -> bool:
    """Check if every code point of s is in U+0000 NULL to U+00FF (ÿ).

    Isomorphic strings map 1:1 onto bytes.
    """
    return string_matches(s, _is_isomorphic_code_point)


def is_scalar_value_string(s: str) -> bool:
    """Check if s holds no surrogate code points."""
    return string_matches(s, is_scalar_value)


# ============================================================================
# SCANNING
# ============================================================================


def collect_code_points(s: str, position: int, predicate: Predicate) -> tuple[str, int]:
    """Collect a sequence of code points satisfying predicate.

    Starting at position, collects the longest run of code points for which
    predicate holds and stops at the first one that fails (or at the end of
    input). The failing code point is not consumed.

    Args:
        s: Input string
        position: Code point index to start collecting from
        predicate: Test applied to each code point

    Returns:
        Tuple of (collected string, position right after it). If position is
        at or past the end of s, returns ("", position) unchanged.

    Raises:
        PositionError: If position is negative

    Example:
        >>> from whatwg_infra.codepoints import is_ascii_alpha
        >>> collect_code_points("test1234", 0, is_ascii_alpha)
        ('test', 4)
        >>> collect_code_points("test", 5, is_ascii_alpha)
        ('', 5)
    """
    start = _start_cursor(s, position)
    if start.is_eof:
        logger.debug(
            "Collect started at position %d of %d code points; nothing collected",
            position,
            len(s),
        )
        return "", position

    end = start.skip_while(predicate)
    return start.slice_to(end.pos), end.pos


def skip_ascii_whitespace(s: str, position: int) -> int:
    """Return the position after any ASCII whitespace starting at position.

    Equivalent to collecting ASCII whitespace and discarding the result.

    Example:
        >>> skip_ascii_whitespace("  \\tx", 0)
        3
    """
    return _start_cursor(s, position).skip_while(is_ascii_whitespace).pos


# ============================================================================
# TRANSFORMS
# ============================================================================


def convert_to_scalar_value_string(s: str) -> str:
    """Replace every surrogate code point with U+FFFD REPLACEMENT CHARACTER.

    One code point in, one code point out: the length is preserved and the
    conversion is idempotent.

    Example:
        >>> convert_to_scalar_value_string("a\\ud800b")
        'a\\ufffdb'
    """
    return "".join(REPLACEMENT_CHARACTER if is_surrogate(ch) else ch for ch in s)


def strip_newlines(s: str) -> str:
    """Remove every U+000A LF and U+000D CR from s."""
    return "".join(ch for ch in s if ch not in (LF, CR))


def normalize_newlines(s: str) -> str:
    """Normalize line endings to U+000A LF.

    Every CR LF pair becomes a single LF, and every remaining lone CR becomes
    LF. A CR LF pair is consumed as one unit, so its LF is never revisited.

    Example:
        >>> normalize_newlines("a\\r\\ntttt\\r")
        'a\\ntttt\\n'
        >>> normalize_newlines("\\r\\r\\n")
        '\\n\\n'
    """
    parts: list[str] = []
    cursor = Cursor(s, 0)
    while not cursor.is_eof:
        if cursor.current in (CR, LF):
            parts.append(LF)
            cursor = cursor.skip_line_end()
            continue
        # Copy the whole run up to the next line ending in one slice
        run_end = cursor.skip_while(lambda ch: ch not in (CR, LF))
        parts.append(cursor.slice_to(run_end.pos))
        cursor = run_end
    return "".join(parts)


def strip_leading_and_trailing_ascii_whitespace(s: str) -> str:
    """Remove ASCII whitespace from both ends of s.

    Interior whitespace is untouched. Only TAB, LF, FF, CR, and SPACE are
    stripped, so unlike str.strip() this keeps U+000B VERTICAL TAB, U+00A0
    NO-BREAK SPACE, and the other Unicode spaces.

    Both scans are bounded: the leading scan stops at the end of input and
    the trailing scan never moves before the leading one, so a string made
    only of ASCII whitespace strips to "".

    Example:
        >>> strip_leading_and_trailing_ascii_whitespace("\\t a b \\n")
        'a b'
        >>> strip_leading_and_trailing_ascii_whitespace(" \\r\\n ")
        ''
    """
    start = Cursor(s, 0).skip_while(is_ascii_whitespace).pos
    end = len(s)
    while end > start and is_ascii_whitespace(s[end - 1]):
        end -= 1
    return s[start:end]


def strip_and_collapse_ascii_whitespace(s: str) -> str:
    """Collapse ASCII whitespace runs to one SPACE, then strip both ends.

    Every maximal run of one or more ASCII whitespace code points becomes a
    single U+0020 SPACE. The result is idempotent.

    Example:
        >>> strip_and_collapse_ascii_whitespace("\\r  \\n  cat dog  hamster \\n\\r")
        'cat dog hamster'
    """
    parts: list[str] = []
    cursor = Cursor(s, 0)
    while not cursor.is_eof:
        if is_ascii_whitespace(cursor.current):
            parts.append(SPACE)
            cursor = cursor.skip_while(is_ascii_whitespace)
            continue
        run_end = cursor.skip_while(_is_not_ascii_whitespace)
        parts.append(cursor.slice_to(run_end.pos))
        cursor = run_end
    return strip_leading_and_trailing_ascii_whitespace("".join(parts))


# ============================================================================
# ASCII CASE
# ============================================================================


def ascii_lowercase(s: str) -> str:
    """Replace ASCII upper alphas with their ASCII lower alpha counterparts.

    Example:
        >>> ascii_lowercase("ÄBC")
        'Äbc'
    """
    return s.translate(_TO_ASCII_LOWER)


def ascii_uppercase(s: str) -> str:
    """Replace ASCII lower alphas with their ASCII upper alpha counterparts."""
    return s.translate(_TO_ASCII_UPPER)


def is_ascii_case_insensitive_match(a: str, b: str) -> bool:
    """Check if a and b are equal after ASCII lowercasing both.

    Non-ASCII letters must match exactly: "Ä" does not match "ä".
    """
    return ascii_lowercase(a) == ascii_lowercase(b)


# ============================================================================
# SPLITTING
# ============================================================================


def split_on_ascii_whitespace(s: str) -> list[str]:
    """Split s into tokens separated by runs of ASCII whitespace.

    Leading and trailing whitespace produce no empty tokens.

    Example:
        >>> split_on_ascii_whitespace("  a\\tb\\x0bc  ")
        ['a', 'b\\x0bc']
    """
    tokens: list[str] = []
    position = skip_ascii_whitespace(s, 0)
    while position < len(s):
        token, position = collect_code_points(s, position, _is_not_ascii_whitespace)
        tokens.append(token)
        position = skip_ascii_whitespace(s, position)
    return tokens


def strictly_split(s: str, delimiter: str) -> list[str]:
    """Split s on every occurrence of a single code point delimiter.

    Every delimiter produces a boundary, so empty tokens are kept: "" splits
    to [""] and "a," splits to ["a", ""].

    Args:
        s: Input string
        delimiter: Single code point to split on

    Returns:
        List of tokens. Joining them with delimiter reproduces s.
    """
    def not_delimiter(ch: str) -> bool:
        return ch != delimiter

    token, position = collect_code_points(s, 0, not_delimiter)
    tokens = [token]
    while position < len(s):
        # The collect stopped on a delimiter; step over it
        position += 1
        token, position = collect_code_points(s, position, not_delimiter)
        tokens.append(token)
    return tokens


def _is_not_comma(ch: str) -> bool:
    return ch != COMMA


def split_on_commas(s: str) -> list[str]:
    """Split s on U+002C (,) and strip ASCII whitespace from each token.

    Example:
        >>> split_on_commas(" a , b,,c ")
        ['a', 'b', '', 'c']
        >>> split_on_commas("")
        []
    """
    tokens: list[str] = []
    position = 0
    while position < len(s):
        token, position = collect_code_points(s, position, _is_not_comma)
        tokens.append(strip_leading_and_trailing_ascii_whitespace(token))
        if position < len(s):
            position += 1
    return tokens
