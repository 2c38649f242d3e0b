"""Fuzz testing infrastructure for whatwg-infra.

This package contains:
- shadow_infra: Regex-based reference implementation for differential testing
- test_strings_oracle: Differential tests and a position-variable state machine

Python 3.13+.
"""
