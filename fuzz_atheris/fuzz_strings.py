#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: strings - Infra String Algorithms
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# FUZZ_PLUGIN_HEADER_END
"""Infra String Algorithm Fuzzer (Atheris).

Targets: whatwg_infra.strings, whatwg_infra.codeunits

Feeds libFuzzer-generated text through every string algorithm and checks
structural invariants after each call: normalized text holds no CR,
collapsing is idempotent, scalar value conversion keeps length, and the
UTF-16 view round-trips. Any exception outside ALLOWED_EXCEPTIONS, or any
invariant breach, is a finding.

Run:
    python fuzz_atheris/fuzz_strings.py -max_total_time=60

Requires Python 3.13+ (uses PEP 695 type aliases).
"""

from __future__ import annotations

import argparse
import atexit
import gc
import logging
import pathlib
import sys
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

# --- Dependency Checks ---
_psutil_mod: Any = None
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for check_dependencies
    import psutil as _psutil_mod  # type: ignore[no-redef]
except ImportError:
    pass

try:  # noqa: SIM105 - need module ref for check_dependencies
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

from fuzz_common import (  # noqa: E402 - after dependency capture
    GC_INTERVAL,
    FuzzerState,
    build_weighted_schedule,
    check_dependencies,
    emit_report,
    record_error,
    record_iteration,
    run_fuzzer,
    select_pattern_round_robin,
)

check_dependencies(["psutil", "atheris"], [_psutil_mod, _atheris_mod])

import atheris  # noqa: E402


class StringsFuzzError(Exception):
    """Raised when an invariant breach is detected."""


# --- Constants ---

ALLOWED_EXCEPTIONS = (ValueError, TypeError)

_PATTERN_WEIGHTS: Sequence[tuple[str, int]] = (
    ("whitespace_runs", 10),
    ("newline_mix", 10),
    ("comma_list", 8),
    ("surrogates", 8),
    ("astral", 6),
    ("long_run", 3),
    ("raw_unicode", 15),
)

_PATTERN_SCHEDULE: tuple[str, ...] = build_weighted_schedule(
    [name for name, _ in _PATTERN_WEIGHTS],
    [weight for _, weight in _PATTERN_WEIGHTS],
)

_WHITESPACE_ALPHABET = ["\t", "\n", "\x0c", "\r", " ", "\x0b", "\xa0", "a", "B", "7"]
_NEWLINE_ALPHABET = ["\r", "\n", "\r\n", "\n\r", "x", " "]


# --- Module State ---

_state = FuzzerState(fuzzer_name="strings")
_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "strings"

atexit.register(lambda: emit_report(_state, _REPORT_DIR, final=True))

# --- Suppress logging and instrument imports ---
logging.getLogger("whatwg_infra").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["whatwg_infra"]):
    from whatwg_infra.codepoints import is_ascii_alpha, is_ascii_whitespace, is_surrogate
    from whatwg_infra.codeunits import code_unit_length, code_units, from_code_units
    from whatwg_infra.strings import (
        ascii_lowercase,
        collect_code_points,
        convert_to_scalar_value_string,
        is_ascii_case_insensitive_match,
        normalize_newlines,
        split_on_ascii_whitespace,
        split_on_commas,
        strictly_split,
        strip_and_collapse_ascii_whitespace,
        strip_leading_and_trailing_ascii_whitespace,
        strip_newlines,
    )


# --- Input Generation ---


def _pick_joined(fdp: atheris.FuzzedDataProvider, alphabet: list[str], limit: int) -> str:
    count = fdp.ConsumeIntInRange(0, limit)
    return "".join(fdp.PickValueInList(alphabet) for _ in range(count))


def _generate_input(fdp: atheris.FuzzedDataProvider, pattern: str) -> str:
    """Generate input text for a given pattern."""
    match pattern:
        case "whitespace_runs":
            return _pick_joined(fdp, _WHITESPACE_ALPHABET, 60)
        case "newline_mix":
            return _pick_joined(fdp, _NEWLINE_ALPHABET, 40)
        case "comma_list":
            return _pick_joined(fdp, [",", " ", "a", "bc", "\t", ",,"], 30)
        case "surrogates":
            return "".join(
                chr(fdp.ConsumeIntInRange(0xD7FF, 0xE000))
                for _ in range(fdp.ConsumeIntInRange(0, 12))
            )
        case "astral":
            return "".join(
                chr(fdp.ConsumeIntInRange(0xFFF0, 0x10FFFF))
                for _ in range(fdp.ConsumeIntInRange(0, 12))
            )
        case "long_run":
            return fdp.PickValueInList(["a", " ", "\r\n"]) * fdp.ConsumeIntInRange(100, 5000)
        case _:
            return fdp.ConsumeUnicode(fdp.ConsumeIntInRange(0, 200))


# --- Invariant Checks ---


def _check_whitespace(s: str) -> None:
    stripped = strip_leading_and_trailing_ascii_whitespace(s)
    if stripped and (is_ascii_whitespace(stripped[0]) or is_ascii_whitespace(stripped[-1])):
        raise StringsFuzzError(f"strip left whitespace at an end: {s!r}")

    collapsed = strip_and_collapse_ascii_whitespace(s)
    if strip_and_collapse_ascii_whitespace(collapsed) != collapsed:
        raise StringsFuzzError(f"collapse not idempotent: {s!r}")
    if collapsed != " ".join(split_on_ascii_whitespace(s)):
        raise StringsFuzzError(f"collapse disagrees with split: {s!r}")


def _check_newlines(s: str) -> None:
    normalized = normalize_newlines(s)
    if "\r" in normalized:
        raise StringsFuzzError(f"CR survived normalization: {s!r}")
    if strip_newlines(normalized) != strip_newlines(s):
        raise StringsFuzzError(f"normalization changed non-newline text: {s!r}")


def _check_splitting(s: str) -> None:
    if ",".join(strictly_split(s, ",")) != s:
        raise StringsFuzzError(f"strictly_split lost text: {s!r}")
    for token in split_on_commas(s):
        if "," in token or token != strip_leading_and_trailing_ascii_whitespace(token):
            raise StringsFuzzError(f"bad comma token {token!r} from {s!r}")


def _check_code_points(s: str) -> None:
    converted = convert_to_scalar_value_string(s)
    if len(converted) != len(s) or any(is_surrogate(ch) for ch in converted):
        raise StringsFuzzError(f"scalar value conversion broken: {s!r}")

    units = code_units(s)
    if len(units) != code_unit_length(s):
        raise StringsFuzzError(f"code unit length mismatch: {s!r}")
    if from_code_units(code_units(converted)) != converted:
        raise StringsFuzzError(f"code unit round trip failed: {s!r}")

    collected, position = collect_code_points(s, 0, is_ascii_alpha)
    if s and collected != s[:position]:
        raise StringsFuzzError(f"collect result is not a prefix: {s!r}")

    if not is_ascii_case_insensitive_match(s, ascii_lowercase(s)):
        raise StringsFuzzError(f"ASCII lowercase does not match itself: {s!r}")


# --- Main Entry Point ---


def test_one_input(data: bytes) -> None:
    """Atheris entry point: run every string algorithm over one input."""
    _state.iterations += 1

    if _state.iterations % _state.checkpoint_interval == 0:
        emit_report(_state, _REPORT_DIR, final=False)

    start_time = time.perf_counter()
    fdp = atheris.FuzzedDataProvider(data)
    pattern = select_pattern_round_robin(_state, _PATTERN_SCHEDULE)
    s = _generate_input(fdp, pattern)

    try:
        _check_whitespace(s)
        _check_newlines(s)
        _check_splitting(s)
        _check_code_points(s)
    except StringsFuzzError:
        _state.findings += 1
        raise
    except ALLOWED_EXCEPTIONS as e:
        record_error(_state, e)
    except Exception:
        _state.findings += 1
        raise
    finally:
        record_iteration(_state, start_time)
        if _state.iterations % GC_INTERVAL == 0:
            gc.collect()


def main() -> None:
    """Run the strings fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Infra string algorithm fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--checkpoint-interval",
        type=int,
        default=500,
        help="Emit report every N iterations (default: 500)",
    )

    args, remaining = parser.parse_known_args()
    _state.checkpoint_interval = args.checkpoint_interval

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    sys.argv = [sys.argv[0], *remaining]

    print("=" * 80)
    print("Infra String Algorithm Fuzzer (Atheris)")
    print(f"Patterns:   {len(_PATTERN_WEIGHTS)} ({len(_PATTERN_SCHEDULE)} weighted slots)")
    print("=" * 80)

    run_fuzzer(_state, atheris, test_one_input)


if __name__ == "__main__":
    main()
