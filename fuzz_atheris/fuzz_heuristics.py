#!/usr/bin/env python3
"""Numeric Parse Heuristic Fuzzer (Atheris).

Targets: numscore.heuristics (float_score, integer_score, width adapters,
score_parse)

Checks invariants that must hold for any input string:
- None scores H_REACHED_BUT_NULL, "" scores H_NOT_NULL
- any other string scores in (H_NOT_NULL, 1.0]
- a score of 1.0 is returned iff the string conforms to the grammar
- score_parse() agrees with the heuristic of its target

Requires Python 3.13+.
"""

from __future__ import annotations

import argparse
import atexit
import json
import logging
import pathlib
import re
import sys
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

# --- Dependency Checks ---
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

if _atheris_mod is None:
    print("-" * 80, file=sys.stderr)
    print("ERROR: Missing required dependency: atheris", file=sys.stderr)
    print("Install with: pip install 'numscore[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

import atheris  # noqa: E402  # pylint: disable=C0412,C0413

# --- Domain Metrics ---


@dataclass
class HeuristicsMetrics:
    """Domain-specific metrics for the heuristics fuzzer."""

    iterations: int = 0
    exact_matches: int = 0
    findings: int = 0
    pattern_coverage: dict[str, int] = field(default_factory=dict)
    total_time_ms: float = 0.0


class HeuristicsFuzzError(Exception):
    """Raised when an invariant breach is detected."""


# --- Constants ---

# Pattern definitions with weights (name, weight)
_PATTERN_WEIGHTS: Sequence[tuple[str, int]] = (
    # Valid (4 patterns)
    ("integer_literal", 8),
    ("float_literal", 8),
    ("width_minimum", 5),
    ("leading_dot", 5),
    # Edge cases (5 patterns)
    ("minus_dot", 6),
    ("too_long", 6),
    ("multiple_dots", 6),
    ("signs", 6),
    ("unicode_digits", 6),
    # Invalid (3 patterns)
    ("null_bytes", 4),
    ("astral", 5),
    ("raw_unicode", 10),
)

_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)

_FLOAT_GRAMMAR = re.compile(r"-?[0-9]*\.?[0-9]*")
_DIGIT = re.compile(r"[0-9]")

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "heuristics"
_REPORT_FILENAME = "fuzz_heuristics_report.json"

# --- Module State ---

_metrics = HeuristicsMetrics()


def _emit_report() -> None:
    """Write final metrics as JSON."""
    _REPORT_DIR.mkdir(parents=True, exist_ok=True)
    report = {
        "fuzzer": "heuristics",
        "iterations": _metrics.iterations,
        "exact_matches": _metrics.exact_matches,
        "findings": _metrics.findings,
        "pattern_coverage": dict(sorted(_metrics.pattern_coverage.items())),
        "avg_time_ms": (
            _metrics.total_time_ms / _metrics.iterations if _metrics.iterations else 0.0
        ),
    }
    (_REPORT_DIR / _REPORT_FILENAME).write_text(json.dumps(report, indent=2), encoding="utf-8")


atexit.register(_emit_report)

# --- Suppress logging and instrument imports ---
logging.getLogger("numscore").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["numscore"]):
    from numscore.constants import (
        H_NOT_NULL,
        H_REACHED_BUT_NULL,
        INT_MIN_VALUE,
        LONG_MIN_VALUE,
        SHORT_MIN_VALUE,
    )
    from numscore.enums import NumericType
    from numscore.heuristics import (
        byte_score,
        float_score,
        int_score,
        integer_score,
        long_score,
        score_parse,
        short_score,
    )

_EXPECTED = {
    NumericType.BYTE: byte_score,
    NumericType.SHORT: short_score,
    NumericType.INT: int_score,
    NumericType.LONG: long_score,
    NumericType.FLOAT: float_score,
    NumericType.DOUBLE: float_score,
}


# --- Input Generation ---


def _generate_input(  # noqa: PLR0911
    fdp: atheris.FuzzedDataProvider,
    pattern_name: str,
) -> str:
    """Generate an input string for a given pattern."""
    match pattern_name:
        case "integer_literal":
            return str(fdp.ConsumeIntInRange(-(10**12), 10**12))
        case "float_literal":
            return f"{fdp.ConsumeIntInRange(-9999, 9999)}.{abs(fdp.ConsumeInt(3))}"
        case "width_minimum":
            return str(fdp.PickValueInList([-128, SHORT_MIN_VALUE, INT_MIN_VALUE, LONG_MIN_VALUE]))
        case "leading_dot":
            return fdp.PickValueInList(["", "-"]) + "." + str(abs(fdp.ConsumeInt(4)))
        case "minus_dot":
            return fdp.PickValueInList(["-.", "-", ".", "-..", "-.5", "-1."])
        case "too_long":
            return "9" * fdp.ConsumeIntInRange(10, 64)
        case "multiple_dots":
            return fdp.PickValueInList(["1.2.3", "..", "1..2", ".123.", "-.-."])
        case "signs":
            return fdp.PickValueInList(["+1", "--1", "1-", "+-1", "-", "1e5", "1E-5"])
        case "unicode_digits":
            return fdp.PickValueInList(["٠١٢", "๑๒", "１２"])
        case "null_bytes":
            return f"1\x00{fdp.ConsumeIntInRange(0, 999)}"
        case "astral":
            return "\U0001f600" * fdp.ConsumeIntInRange(1, 8)
        case _:
            return fdp.ConsumeUnicode(fdp.ConsumeIntInRange(0, 64))


# --- Invariants ---


def _float_conforms(value: str) -> bool:
    return _FLOAT_GRAMMAR.fullmatch(value) is not None and _DIGIT.search(value) is not None


def _integer_conforms(value: str, max_digits: int) -> bool:
    if len(value) == 1:
        return "0" <= value <= "9"
    return (
        len(value) <= max_digits
        and (value[0] == "-" or "0" <= value[0] <= "9")
        and all("0" <= c <= "9" for c in value[1:])
    )


def _check_score(label: str, value: str, score: float | None, conforms: bool) -> None:
    if score is None:
        msg = f"{label}: no score for {value!r}"
        raise HeuristicsFuzzError(msg)
    if value == "":
        if score != H_NOT_NULL:
            msg = f"{label}: empty input scored {score}"
            raise HeuristicsFuzzError(msg)
        return
    if not H_NOT_NULL < score <= 1.0:
        msg = f"{label}: score {score} out of range for {value!r}"
        raise HeuristicsFuzzError(msg)
    if (score == 1.0) != conforms:
        msg = f"{label}: score {score} but conforms={conforms} for {value!r}"
        raise HeuristicsFuzzError(msg)


def _check_constant_inputs() -> None:
    """Input-independent invariants, checked once before fuzzing starts."""
    if float_score(None) != H_REACHED_BUT_NULL:
        msg = "float_score(None) is not H_REACHED_BUT_NULL"
        raise HeuristicsFuzzError(msg)
    for target in NumericType:
        if score_parse(target, None) != (H_REACHED_BUT_NULL, ()):
            msg = f"score_parse({target}, None) is not H_REACHED_BUT_NULL"
            raise HeuristicsFuzzError(msg)


def _check_all(value: str, max_digits: int) -> None:
    score = float_score(value)
    _check_score("float", value, score, _float_conforms(value))
    if score == 1.0:
        _metrics.exact_matches += 1

    int_result, errors = integer_score(value, max_digits)
    if errors:
        msg = f"integer_score returned errors for max_digits={max_digits}"
        raise HeuristicsFuzzError(msg)
    _check_score("integer", value, int_result, _integer_conforms(value, max_digits))

    for target in NumericType:
        dispatched, errors = score_parse(target, value)
        if errors or dispatched != _EXPECTED[target](value):
            msg = f"score_parse({target}) disagrees for {value!r}"
            raise HeuristicsFuzzError(msg)


# --- Main Entry Point ---


def test_one_input(data: bytes) -> None:
    """Atheris entry point: check heuristic invariants."""
    _metrics.iterations += 1
    start_time = time.perf_counter()
    fdp = atheris.FuzzedDataProvider(data)

    # Round-robin pattern selection (immune to coverage-guided bias)
    pattern_name = _PATTERN_SCHEDULE[_metrics.iterations % len(_PATTERN_SCHEDULE)]
    _metrics.pattern_coverage[pattern_name] = _metrics.pattern_coverage.get(pattern_name, 0) + 1

    max_digits = fdp.ConsumeIntInRange(0, 25)
    value = _generate_input(fdp, pattern_name)

    try:
        _check_all(value, max_digits)
    except Exception:
        # Every exception is a finding: scoring is total over strings
        _metrics.findings += 1
        raise
    finally:
        _metrics.total_time_ms += (time.perf_counter() - start_time) * 1000


def main() -> None:
    """Run the heuristics fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Numeric parse heuristic fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--rss-limit-mb",
        type=int,
        default=2048,
        help="libFuzzer RSS limit in MB (default: 2048)",
    )

    # Parse known args, pass rest to Atheris/libFuzzer
    args, remaining = parser.parse_known_args()

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append(f"-rss_limit_mb={args.rss_limit_mb}")

    sys.argv = [sys.argv[0], *remaining]

    print("=" * 80)
    print("Numeric Parse Heuristic Fuzzer (Atheris)")
    print("Target:     numscore.heuristics")
    print(
        f"Patterns:   {len(_PATTERN_WEIGHTS)}"
        f" ({sum(w for _, w in _PATTERN_WEIGHTS)} weighted slots)"
    )
    print("=" * 80)

    _check_constant_inputs()
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
