"""Hypothesis strategies for code points and strings.

Python strings index by code point, and hypothesis.strategies.characters()
excludes surrogates by default. Lone surrogates are generated separately so
the surrogate-handling paths are exercised.

Usage:
    from hypothesis import given
    from tests.strategies.text import mixed_text

    @given(s=mixed_text)
    def test_something(s):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# CONSTANTS
# ============================================================================

ASCII_WHITESPACE_CHARS = ("\t", "\n", "\x0c", "\r", " ")
NEWLINE_CHARS = ("\r", "\n")

# Characters commonly mistaken for ASCII whitespace
_LOOKALIKE_WHITESPACE = ("\x0b", "\xa0", "\u2003", "\u3000", "\ufeff", "\x85")

# ============================================================================
# CODE POINTS
# ============================================================================

any_code_points: SearchStrategy[int] = st.integers(min_value=0, max_value=0x10FFFF)

surrogate_values: SearchStrategy[int] = st.integers(min_value=0xD800, max_value=0xDFFF)

lone_surrogates: SearchStrategy[str] = surrogate_values.map(chr)

_REGIONS: dict[str, tuple[int, int]] = {
    "c0": (0x0000, 0x001F),
    "ascii_printable": (0x0020, 0x007F),
    "latin1": (0x0080, 0x00FF),
    "bmp_low": (0x0100, 0xD7FF),
    "surrogate": (0xD800, 0xDFFF),
    "bmp_high": (0xE000, 0xFFFF),
    "supplementary": (0x10000, 0x10FFFF),
}


@composite
def code_points_by_region(draw: st.DrawFn) -> int:
    """Generate a code point from a named region of the code space.

    Events emitted:
    - region={name}: Which region the code point was drawn from
    """
    region = draw(st.sampled_from(sorted(_REGIONS)))
    minimum, maximum = _REGIONS[region]
    event(f"region={region}")
    return draw(st.integers(min_value=minimum, max_value=maximum))


# ============================================================================
# STRINGS
# ============================================================================

ascii_text: SearchStrategy[str] = st.text(
    alphabet=st.characters(min_codepoint=0x00, max_codepoint=0x7F),
    max_size=100,
)

# Scalar value strings (no surrogates)
scalar_text: SearchStrategy[str] = st.text(max_size=100)

# Arbitrary code point strings, lone surrogates included
mixed_text: SearchStrategy[str] = st.lists(
    st.one_of(st.characters(), lone_surrogates),
    max_size=100,
).map("".join)


@composite
def whitespace_heavy_text(draw: st.DrawFn) -> str:
    """Generate text dense in ASCII whitespace and whitespace look-alikes.

    Events emitted:
    - whitespace_runs={n}: Number of whitespace runs inserted
    """
    words = draw(
        st.lists(
            st.text(
                alphabet=st.sampled_from("abcXYZ09-\xe9\U0001f600"),
                min_size=0,
                max_size=6,
            ),
            max_size=10,
        )
    )
    separators = st.text(
        alphabet=st.sampled_from(ASCII_WHITESPACE_CHARS + _LOOKALIKE_WHITESPACE),
        min_size=0,
        max_size=4,
    )
    parts = [draw(separators)]
    for word in words:
        parts.append(word)
        parts.append(draw(separators))
    event(f"whitespace_runs={len(words) + 1}")
    return "".join(parts)


@composite
def newline_heavy_text(draw: st.DrawFn) -> str:
    """Generate text dense in CR, LF, and CR LF sequences.

    Events emitted:
    - has_crlf={bool}: Whether at least one CR LF pair is present
    """
    pieces = draw(
        st.lists(
            st.sampled_from(["\r", "\n", "\r\n", "\n\r", "a", "bc", " ", "\u2028"]),
            max_size=30,
        )
    )
    s = "".join(pieces)
    has_crlf = "\r\n" in s
    event(f"has_crlf={has_crlf}")
    return s
