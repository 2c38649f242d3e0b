"""Hypothesis strategies for whatwg-infra property-based testing.

Strategies are organized by domain:

- text: code points, surrogates, ASCII whitespace, and mixed strings

Usage:
    from tests.strategies import any_code_points, mixed_text
    from tests.strategies.text import whitespace_heavy_text

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - code_points_by_region, whitespace_heavy_text, newline_heavy_text
"""

from .text import (
    ASCII_WHITESPACE_CHARS,
    NEWLINE_CHARS,
    any_code_points,
    ascii_text,
    code_points_by_region,
    lone_surrogates,
    mixed_text,
    newline_heavy_text,
    scalar_text,
    surrogate_values,
    whitespace_heavy_text,
)

__all__ = [
    "ASCII_WHITESPACE_CHARS",
    "NEWLINE_CHARS",
    "any_code_points",
    "ascii_text",
    "code_points_by_region",
    "lone_surrogates",
    "mixed_text",
    "newline_heavy_text",
    "scalar_text",
    "surrogate_values",
    "whitespace_heavy_text",
]
