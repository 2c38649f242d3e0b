"""Shared fuzzing infrastructure for Atheris-based fuzzers.

Provides the state, weighted pattern schedule, memory sampling, and JSON
reporting used by the fuzz targets in this directory.

Not a fuzz target itself -- no FUZZ_PLUGIN header.
"""

from __future__ import annotations

import json
import os
import pathlib
import statistics
import sys
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Sequence

try:
    import psutil
except ImportError:
    psutil = None  # type: ignore[assignment]


# --- PEP 695 Type Aliases ---

FuzzStats: TypeAlias = dict[str, int | str | float]

# --- Constants ---

GC_INTERVAL = 256
"""Periodic gc.collect() interval to reclaim Atheris instrumentation cycles."""

MEMORY_SAMPLE_INTERVAL = 100
"""Iterations between RSS samples."""


# --- Process Handle (lazy singleton) ---

_process: psutil.Process | None = None


def get_process() -> psutil.Process:
    """Lazy-initialize psutil process handle."""
    global _process  # noqa: PLW0603  # pylint: disable=global-statement
    if _process is None:
        _process = psutil.Process(os.getpid())
    return _process


# --- Dependency Checks ---


def check_dependencies(dep_names: Sequence[str], dep_modules: Sequence[Any]) -> None:
    """Verify fuzzing dependencies are importable, exit with instructions if not.

    Args:
        dep_names: Human-readable names (e.g., ["psutil", "atheris"])
        dep_modules: Corresponding module objects (None if import failed)
    """
    missing = [name for name, mod in zip(dep_names, dep_modules, strict=True) if mod is None]
    if missing:
        print("-" * 80, file=sys.stderr)
        print("ERROR: Missing required dependencies for fuzzing:", file=sys.stderr)
        for dep in missing:
            print(f"  - {dep}", file=sys.stderr)
        print("", file=sys.stderr)
        print("Install with: pip install -e '.[fuzz]'", file=sys.stderr)
        print("-" * 80, file=sys.stderr)
        sys.exit(1)


# --- Fuzzer State ---


@dataclass
class FuzzerState:
    """Observability state for one fuzz target."""

    fuzzer_name: str
    iterations: int = 0
    findings: int = 0
    status: str = "incomplete"

    performance_history: deque[float] = field(
        default_factory=lambda: deque(maxlen=10000),
    )
    memory_history: deque[float] = field(
        default_factory=lambda: deque(maxlen=1000),
    )
    initial_memory_mb: float = 0.0

    pattern_coverage: dict[str, int] = field(default_factory=dict)
    error_counts: dict[str, int] = field(default_factory=dict)

    checkpoint_interval: int = 500


# --- Weighted Schedule ---


def build_weighted_schedule(
    items: Sequence[str],
    weights: Sequence[int],
) -> tuple[str, ...]:
    """Pre-compute a weighted schedule from items.

    Returns a tuple of length sum(weights) where each item appears
    proportional to its weight.
    """
    schedule: list[str] = []
    for item, weight in zip(items, weights, strict=True):
        schedule.extend([item] * weight)
    return tuple(schedule)


def select_pattern_round_robin(state: FuzzerState, schedule: tuple[str, ...]) -> str:
    """Pick the next pattern from the schedule by iteration count.

    libFuzzer's coverage feedback biases FDP-consumed selectors toward a few
    patterns; cycling on the iteration counter keeps the actual distribution
    equal to the intended weights. Callers increment state.iterations first.
    """
    pattern = schedule[(state.iterations - 1) % len(schedule)]
    state.pattern_coverage[pattern] = state.pattern_coverage.get(pattern, 0) + 1
    return pattern


# --- Performance / Memory Tracking ---


def record_iteration(state: FuzzerState, start_time: float) -> None:
    """Record wall time for one iteration and sample memory periodically."""
    state.performance_history.append((time.perf_counter() - start_time) * 1000)
    if state.iterations % MEMORY_SAMPLE_INTERVAL == 0:
        state.memory_history.append(get_process().memory_info().rss / (1024 * 1024))


def record_error(state: FuzzerState, error: Exception) -> None:
    """Count an expected exception by type."""
    key = type(error).__name__
    state.error_counts[key] = state.error_counts.get(key, 0) + 1


# --- Reporting ---


def build_stats_dict(state: FuzzerState) -> FuzzStats:
    """Build the stats dictionary for the JSON report."""
    stats: FuzzStats = {
        "fuzzer": state.fuzzer_name,
        "status": state.status,
        "iterations": state.iterations,
        "findings": state.findings,
    }

    if state.performance_history:
        stats["perf_mean_ms"] = round(statistics.fmean(state.performance_history), 4)
        stats["perf_max_ms"] = round(max(state.performance_history), 4)

    if state.memory_history:
        stats["memory_peak_mb"] = round(max(state.memory_history), 2)
        stats["memory_growth_mb"] = round(
            state.memory_history[-1] - state.initial_memory_mb, 2
        )

    stats["patterns_tested"] = len(state.pattern_coverage)
    for pattern, count in sorted(state.pattern_coverage.items()):
        stats[f"pattern_{pattern}"] = count

    for error_type, count in sorted(state.error_counts.items()):
        stats[f"error_{error_type}"] = count

    return stats


def emit_report(state: FuzzerState, report_dir: pathlib.Path, *, final: bool) -> None:
    """Emit JSON report to stderr and to report_dir/<fuzzer>_report.json.

    Args:
        state: Fuzzer state (status set to "complete" when final)
        report_dir: Directory for the JSON report file
        final: Whether this is the end-of-run report
    """
    if final:
        state.status = "complete"
    report = json.dumps(build_stats_dict(state), sort_keys=True)
    marker = "SUMMARY" if final else "CHECKPOINT"

    print(
        f"\n[{marker}-JSON-BEGIN]{report}[{marker}-JSON-END]",
        file=sys.stderr,
        flush=True,
    )

    try:
        report_dir.mkdir(parents=True, exist_ok=True)
        (report_dir / f"{state.fuzzer_name}_report.json").write_text(report, encoding="utf-8")
    except OSError:
        pass


def run_fuzzer(
    state: FuzzerState,
    atheris_module: Any,
    test_one_input: Callable[[bytes], None],
) -> None:
    """Hand control to libFuzzer with the remaining sys.argv."""
    state.initial_memory_mb = get_process().memory_info().rss / (1024 * 1024)
    state.status = "running"
    atheris_module.Setup(sys.argv, test_one_input)
    atheris_module.Fuzz()
