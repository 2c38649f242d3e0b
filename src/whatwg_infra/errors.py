"""Exception hierarchy for whatwg-infra.

Every algorithm in this package is total over its documented domain and
returns a value instead of raising. These exceptions only signal input that
lies outside that domain: a value that is not a code point at all, an
integer outside the code space, or a negative position variable.

Each concrete error also derives from the matching built-in exception, so
callers that already handle TypeError or ValueError keep working.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "CodePointRangeError",
    "CodePointTypeError",
    "CodeUnitRangeError",
    "InfraError",
    "PositionError",
]


class InfraError(Exception):
    """Base exception for all whatwg-infra errors.

    Attributes:
        value: The offending input value
    """

    def __init__(self, message: str, value: object = None) -> None:
        """Initialize InfraError.

        Args:
            message: Human-readable error message
            value: The input that caused the error
        """
        super().__init__(message)
        self.value = value


class CodePointTypeError(InfraError, TypeError):
    """Input is neither a string nor an integer code point.

    Booleans are rejected even though bool subclasses int.
    """


class CodePointRangeError(InfraError, ValueError):
    """Integer outside [0, 0x10FFFF] where a code point must be built."""


class CodeUnitRangeError(InfraError, ValueError):
    """Integer outside [0, 0xFFFF] passed as a UTF-16 code unit."""


class PositionError(InfraError, ValueError):
    """Position variable is negative.

    Positions past the end of the input are valid and make scans no-ops.
    """
