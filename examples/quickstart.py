"""Quickstart example for numscore.

This example shows how a search loop can use numeric parse heuristics as a
fitness signal: instead of "parsed" or "failed", every candidate string gets
a score that grows as it gets closer to a literal the parser would accept.

Note: Examples ignore the 'errors' return value where the configuration is
known to be valid. In production, always check errors.
"""

import random

from numscore import (
    NumericType,
    byte_score,
    float_score,
    int_score,
    integer_score,
    score_parse,
)
from numscore.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Scoring parse attempts
print("=" * 50)
print("Example 1: Scoring Parse Attempts")
print("=" * 50)

for candidate in (None, "", "abc", "12a", "-.", "-1.", "-1.23"):
    print(f"float_score({candidate!r:>8}) = {float_score(candidate):.4f}")
# float_score(   '-1.23') = 1.0000

# Example 2: Integer widths
print("\n" + "=" * 50)
print("Example 2: Integer Widths")
print("=" * 50)

for candidate in ("-128", "-1289", "2147483647"):
    print(f"{candidate!r:>14}: byte={byte_score(candidate):.6f} int={int_score(candidate):.6f}")

# Example 3: Dispatch on the intercepted parse target
print("\n" + "=" * 50)
print("Example 3: Dispatch")
print("=" * 50)

score, errors = score_parse(NumericType.DOUBLE, "3.14")
print(f"double '3.14': {score}")

score, errors = score_parse("decimal", "3.14")
formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
for error in errors:
    if error.diagnostic is not None:
        print(formatter.format(error.diagnostic))
# UNSUPPORTED_NUMERIC_TYPE: Unsupported numeric type 'decimal'

# Example 4: Invalid configuration is returned, not raised
print("\n" + "=" * 50)
print("Example 4: Invalid Configuration")
print("=" * 50)

score, errors = integer_score("42", -1)
print(f"score={score}")
print(errors[0])

# Example 5: Hill climbing towards a valid integer
print("\n" + "=" * 50)
print("Example 5: Hill Climbing")
print("=" * 50)

rng = random.Random(42)
current = "x7$q"
alphabet = "0123456789-.abcxyz$"
for step in range(2000):
    position = rng.randrange(len(current))
    mutated = current[:position] + rng.choice(alphabet) + current[position + 1 :]
    if int_score(mutated) >= int_score(current):
        current = mutated
    if int_score(current) == 1.0:
        print(f"Found parseable input {current!r} after {step + 1} steps")
        break
