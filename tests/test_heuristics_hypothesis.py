"""Hypothesis-based property tests for the numeric parse heuristics.

Focus on the exact-match property (1.0 iff the string conforms to the
grammar), bounds of the score, and agreement between distances and scores.
"""

from __future__ import annotations

from hypothesis import HealthCheck, event, given, settings
from hypothesis import strategies as st

from numscore.constants import (
    BYTE_MAX_DIGITS,
    H_NOT_NULL,
    INT_MAX_DIGITS,
    LONG_MAX_DIGITS,
    SHORT_MAX_DIGITS,
)
from numscore.heuristics import (
    float_distance,
    float_score,
    integer_distance,
    integer_score,
    is_exact_match,
    normalize_distance,
)
from tests.strategies import (
    float_literals,
    integer_literals,
    matches_float_grammar,
    matches_integer_grammar,
    mixed_text,
)

WIDTH_DIGITS = st.sampled_from(
    [BYTE_MAX_DIGITS, SHORT_MAX_DIGITS, INT_MAX_DIGITS, LONG_MAX_DIGITS]
)


class TestFloatHeuristicProperties:
    """Property-based tests for float_score()."""

    @given(value=float_literals())
    @settings(max_examples=200)
    def test_valid_literals_score_one(self, value: str) -> None:
        """Every conforming literal scores exactly 1.0."""
        assert float_score(value) == 1.0

    @given(value=mixed_text())
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_exact_match_iff_grammar(self, value: str) -> None:
        """1.0 is reserved for conforming literals."""
        conforms = matches_float_grammar(value)
        event(f"conforms={conforms}")
        assert is_exact_match(float_score(value)) == conforms

    @given(value=mixed_text().filter(bool))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_score_bounds(self, value: str) -> None:
        """Non-empty input scores in (H_NOT_NULL, 1.0]."""
        assert H_NOT_NULL < float_score(value) <= 1.0

    @given(value=mixed_text().filter(bool))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_score_is_normalized_distance(self, value: str) -> None:
        """float_score() is normalize_distance() of float_distance()."""
        assert float_score(value) == normalize_distance(float_distance(value))


class TestIntegerHeuristicProperties:
    """Property-based tests for integer_score()."""

    @given(data=st.data(), max_digits=WIDTH_DIGITS)
    @settings(max_examples=200)
    def test_valid_literals_score_one(self, data: st.DataObject, max_digits: int) -> None:
        """Every conforming literal scores exactly 1.0."""
        value = data.draw(integer_literals(max_digits))
        assert integer_score(value, max_digits) == (1.0, ())

    @given(value=mixed_text(), max_digits=st.integers(min_value=0, max_value=25))
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_exact_match_iff_grammar(self, value: str, max_digits: int) -> None:
        """1.0 is reserved for conforming literals."""
        score, errors = integer_score(value, max_digits)
        conforms = matches_integer_grammar(value, max_digits)
        event(f"conforms={conforms}")
        assert not errors
        assert is_exact_match(score) == conforms

    @given(value=mixed_text(), max_digits=st.integers(max_value=-1))
    @settings(max_examples=50, suppress_health_check=[HealthCheck.too_slow])
    def test_negative_digit_count_never_scores(self, value: str, max_digits: int) -> None:
        """Invalid configuration never yields a score."""
        score, errors = integer_score(value, max_digits)
        assert score is None
        assert len(errors) == 1

    @given(
        head=st.text(alphabet="0123456789", min_size=1, max_size=5),
        extra=st.integers(min_value=1, max_value=5),
        max_digits=st.integers(min_value=1, max_value=20),
    )
    @settings(max_examples=200)
    def test_longer_than_limit_scores_lower(
        self, head: str, extra: int, max_digits: int
    ) -> None:
        """Padding a literal past the digit limit lowers its score."""
        short_value = head[:max_digits]
        long_value = short_value + "1" * (max_digits - len(short_value) + extra)
        assert integer_distance(long_value, max_digits) > integer_distance(
            short_value, max_digits
        )
