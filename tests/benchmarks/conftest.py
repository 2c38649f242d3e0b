"""pytest-benchmark configuration for whatwg-infra benchmarks.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add whatwg-infra metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "whatwg-infra"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def long_text() -> str:
    """Mixed text of roughly 100k code points with whitespace and newlines."""
    line = "  Hello,\tWorld! caf\xe9 \U0001f600 value=42 \r\n"
    return line * 2500
