"""Performance benchmarks for whatwg-infra.

Benchmarks use pytest-benchmark to measure the string algorithms on long
inputs. Prevents performance regressions in scanning and splitting.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
