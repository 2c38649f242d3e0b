"""Quickstart example for whatwg_infra.

This example demonstrates code point classification and the string
algorithms a tokenizer is typically written against.

Note: Strings are already-decoded Python str values. Astral characters are
one code point; lone surrogates are allowed and handled explicitly.
"""

from whatwg_infra import (
    collect_code_points,
    convert_to_scalar_value_string,
    is_ascii_alpha,
    is_ascii_case_insensitive_match,
    is_ascii_digit,
    is_ascii_whitespace,
    is_noncharacter,
    is_scalar_value,
    normalize_newlines,
    skip_ascii_whitespace,
    split_on_ascii_whitespace,
    split_on_commas,
    strip_and_collapse_ascii_whitespace,
)
from whatwg_infra.codeunits import code_unit_length, is_code_unit_less_than
from whatwg_infra.num import is_uint8

# Example 1: Code point predicates
print("=" * 50)
print("Example 1: Code Point Predicates")
print("=" * 50)

print(is_ascii_whitespace("\x0c"))
# Output: True
print(is_ascii_whitespace("\x0b"))
# Output: False (U+000B VERTICAL TAB is not ASCII whitespace)
print(is_scalar_value(0xD800))
# Output: False
print(is_noncharacter("\U0001fffe"))
# Output: True

# Example 2: Collecting with a position variable
print("\n" + "=" * 50)
print("Example 2: Collecting Code Points")
print("=" * 50)

source = "width=  640px"
name, position = collect_code_points(source, 0, is_ascii_alpha)
position += 1  # skip "="
position = skip_ascii_whitespace(source, position)
digits, position = collect_code_points(source, position, is_ascii_digit)
unit = source[position:]
print(name, int(digits), unit)
# Output: width 640 px

# Example 3: Whitespace and newlines
print("\n" + "=" * 50)
print("Example 3: Whitespace and Newlines")
print("=" * 50)

print(repr(strip_and_collapse_ascii_whitespace("  a \t b\r\n\nc  ")))
# Output: 'a b c'
print(split_on_ascii_whitespace(" text/html  charset=utf-8 "))
# Output: ['text/html', 'charset=utf-8']
print(repr(normalize_newlines("one\r\ntwo\rthree\n")))
# Output: 'one\ntwo\nthree\n'

# Example 4: Commas and case
print("\n" + "=" * 50)
print("Example 4: Comma Lists and ASCII Case")
print("=" * 50)

print(split_on_commas(" gzip , deflate,br"))
# Output: ['gzip', 'deflate', 'br']
print(is_ascii_case_insensitive_match("Content-Type", "content-type"))
# Output: True
print(is_ascii_case_insensitive_match("\u212a", "k"))
# Output: False (KELVIN SIGN is not ASCII)

# Example 5: Surrogates and UTF-16 code units
print("\n" + "=" * 50)
print("Example 5: Surrogates and Code Units")
print("=" * 50)

broken = "a\ud800b"
print(repr(convert_to_scalar_value_string(broken)))
# Output: 'a\ufffdb' (U+FFFD shown escaped)
print(len("\U0001f600"), code_unit_length("\U0001f600"))
# Output: 1 2
print(is_code_unit_less_than("\U0001f600", "\uff5e"))
# Output: True
print(is_uint8(255), is_uint8(256))
# Output: True False
