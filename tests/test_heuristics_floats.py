"""Tests for the floating-point parse heuristic.

Validates float_distance() and float_score() against the grammar
['-']? digit* ['.']? digit*, including the "-." placement rule.
"""

import pytest

from numscore.constants import H_NOT_NULL, H_REACHED_BUT_NULL
from numscore.heuristics import float_distance, float_score, normalize_distance


class TestFloatScoreSentinels:
    """Absent and empty input."""

    def test_none_is_reached_but_null(self) -> None:
        """Absent argument returns the unreachable sentinel."""
        assert float_score(None) == H_REACHED_BUT_NULL

    def test_empty_is_not_null(self) -> None:
        """Empty string returns the base score."""
        assert float_score("") == H_NOT_NULL

    def test_empty_distance_is_zero(self) -> None:
        """float_distance() of an empty string is 0; the score handles it."""
        assert float_distance("") == 0


class TestFloatScoreValidLiterals:
    """Literals already conforming to the grammar score 1.0."""

    @pytest.mark.parametrize(
        "value",
        ["0", "7", "-1.23", "1.5", "-1", "123", ".5", "-.5", "5.", "-1.", "00.00"],
    )
    def test_valid_literal_scores_one(self, value: str) -> None:
        """Distance 0 maps to exactly 1.0."""
        assert float_distance(value) == 0
        assert float_score(value) == 1.0


class TestFloatDistance:
    """Per-position cost rules."""

    def test_single_character_must_be_digit(self) -> None:
        """A lone sign or dot is not free."""
        assert float_distance("-") == 3
        assert float_distance(".") == 2
        assert float_distance("a") == 40

    def test_minus_dot_is_not_optimal(self) -> None:
        """The dot right after a leading '-' in "-." is charged as a digit."""
        assert float_distance("-.") == 2
        assert float_score("-.") == pytest.approx(normalize_distance(2))
        assert float_score("-.") < 1.0

    def test_minus_dot_longer_is_optimal(self) -> None:
        """With more characters the same dot placement is free."""
        assert float_distance("-.5") == 0
        assert float_distance("-..") == 2

    def test_minus_one_dot_beats_missing_dot(self) -> None:
        """"-1." places the dot optimally; "-1x" has no dot at all."""
        assert float_distance("-1.") == 0
        assert float_distance("-1x") == 63
        assert float_score("-1.") > float_score("-1x")
        assert float_distance("-.") > float_distance("-1.")

    def test_only_first_dot_is_free(self) -> None:
        """Later dots must be digits."""
        assert float_distance("1.2.3") == 2
        assert float_distance("..") == 2

    def test_without_dot_positions_can_become_dot(self) -> None:
        """With no dot in the input, the cheaper of digit and dot is charged."""
        assert float_distance("1-") == 1
        assert float_distance("--") == 1
        assert float_distance("12a") == 40
        assert float_distance("1e5") == 44

    def test_first_character_can_be_dot(self) -> None:
        """A leading dot is free but a second non-digit is not."""
        assert float_distance(".5") == 0
        assert float_distance(".-") == 3

    def test_dot_after_non_minus_is_free(self) -> None:
        """A dot at index 1 is free when the first character is not '-'."""
        assert float_distance("a.") == 40

    def test_astral_characters_saturate(self) -> None:
        """A far code point costs at most MAX_CHAR_DISTANCE per position."""
        assert float_distance("1\U0010ffff") == 65_536


class TestFloatScoreOrdering:
    """Scores follow distances."""

    def test_closer_input_scores_higher(self) -> None:
        """Fewer mismatches means a higher score."""
        assert float_score("1.5") > float_score("1.5.") > float_score("x.5.")

    def test_scores_stay_above_base(self) -> None:
        """Even hopeless input stays above H_NOT_NULL."""
        assert H_NOT_NULL < float_score("\U0010ffff" * 30) < 1.0

    def test_scores_above_reached_but_null(self) -> None:
        """Every reached, non-null input beats the null sentinel."""
        assert float_score("zzzz") > float_score(None)
