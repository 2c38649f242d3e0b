"""whatwg-infra - Code point and string primitives of the WHATWG Infra Standard.

Bit-exact implementations of the code point classes and string algorithms
that HTML, URL, and MIME tokenizers are specified against. All functions are
pure and operate on already-decoded strings; no byte encoding is performed.

Public API:
    Code point predicates - is_ascii_whitespace, is_ascii_alpha, is_surrogate,
        is_scalar_value, is_noncharacter, is_code_point_between, ...
    String algorithms - collect_code_points, normalize_newlines,
        strip_and_collapse_ascii_whitespace, convert_to_scalar_value_string, ...
    Cursor - Immutable position variable used by the scanning algorithms

Exceptions:
    InfraError - Base exception class
    CodePointTypeError - Input is not a str or int code point
    CodePointRangeError - Integer outside the Unicode code space
    CodeUnitRangeError - Integer outside the UTF-16 code unit range
    PositionError - Negative position variable

Submodules:
    whatwg_infra.codepoints - Code point classification
    whatwg_infra.strings - String algorithms
    whatwg_infra.codeunits - UTF-16 code unit view (length, prefix, ordering)
    whatwg_infra.num - Fixed-width integer range checks
    whatwg_infra.namespaces - Namespace URI constants
"""

from .codepoints import (
    CodePoint,
    code_point_value,
    code_points,
    from_code_points,
    is_ascii,
    is_ascii_alpha,
    is_ascii_alphanumeric,
    is_ascii_byte,
    is_ascii_digit,
    is_ascii_hex_digit,
    is_ascii_lower_alpha,
    is_ascii_lower_hex_digit,
    is_ascii_tab_or_newline,
    is_ascii_upper_alpha,
    is_ascii_upper_hex_digit,
    is_ascii_whitespace,
    is_c0_control,
    is_c0_control_or_space,
    is_code_point,
    is_code_point_between,
    is_control,
    is_leading_surrogate,
    is_noncharacter,
    is_scalar_value,
    is_surrogate,
    is_trailing_surrogate,
)
from .codeunits import (
    code_unit_length,
    code_units,
    from_code_units,
    is_code_unit_less_than,
    is_code_unit_prefix,
)
from .cursor import Cursor
from .errors import (
    CodePointRangeError,
    CodePointTypeError,
    CodeUnitRangeError,
    InfraError,
    PositionError,
)
from .strings import (
    ascii_lowercase,
    ascii_uppercase,
    collect_code_points,
    convert_to_scalar_value_string,
    is_ascii_case_insensitive_match,
    is_ascii_string,
    is_isomorphic_string,
    is_scalar_value_string,
    normalize_newlines,
    skip_ascii_whitespace,
    split_on_ascii_whitespace,
    split_on_commas,
    strictly_split,
    string_matches,
    strip_and_collapse_ascii_whitespace,
    strip_leading_and_trailing_ascii_whitespace,
    strip_newlines,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("whatwg-infra")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__spec_url__ = "https://infra.spec.whatwg.org/"

__all__ = [
    "CodePoint",
    "CodePointRangeError",
    "CodePointTypeError",
    "CodeUnitRangeError",
    "Cursor",
    "InfraError",
    "PositionError",
    "__spec_url__",
    "__version__",
    "ascii_lowercase",
    "ascii_uppercase",
    "code_point_value",
    "code_points",
    "code_unit_length",
    "code_units",
    "collect_code_points",
    "convert_to_scalar_value_string",
    "from_code_points",
    "from_code_units",
    "is_ascii",
    "is_ascii_alpha",
    "is_ascii_alphanumeric",
    "is_ascii_byte",
    "is_ascii_case_insensitive_match",
    "is_ascii_digit",
    "is_ascii_hex_digit",
    "is_ascii_lower_alpha",
    "is_ascii_lower_hex_digit",
    "is_ascii_string",
    "is_ascii_tab_or_newline",
    "is_ascii_upper_alpha",
    "is_ascii_upper_hex_digit",
    "is_ascii_whitespace",
    "is_c0_control",
    "is_c0_control_or_space",
    "is_code_point",
    "is_code_point_between",
    "is_code_unit_less_than",
    "is_code_unit_prefix",
    "is_control",
    "is_isomorphic_string",
    "is_leading_surrogate",
    "is_noncharacter",
    "is_scalar_value",
    "is_scalar_value_string",
    "is_surrogate",
    "is_trailing_surrogate",
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
