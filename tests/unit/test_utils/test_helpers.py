"""Unit tests for helper utilities."""

import math

import pytest

from naviksha.utils.constants import RiasecDimension
from naviksha.utils.helpers import (
    calculate_weighted_average,
    clamp_score,
    get_riasec_code,
    get_top_dimensions,
    harmonic_weight,
    is_number,
    parse_string_list,
    riasec_percentages,
    round_half_up,
)


class TestNumericHelpers:
    """Test numeric utilities."""

    @pytest.mark.parametrize("value,expected", [
        (62.5, 63),
        (62.4999, 62),
        (0.5, 1),
        (2.5, 3),
        (-0.5, 0),
        (-1.5, -1),
        (84.2, 84),
        (100, 100),
    ])
    def test_round_half_up(self, value, expected):
        """Test halves always round towards positive infinity."""
        assert round_half_up(value) == expected

    def test_clamp_score(self):
        """Test clamping to the default and custom ranges."""
        assert clamp_score(-5) == 0
        assert clamp_score(105) == 100
        assert clamp_score(42.5) == 42.5
        assert clamp_score(15, min_score=20, max_score=30) == 20
        assert clamp_score(math.nan) == 0

    def test_harmonic_weight(self):
        """Test weights 1, 1/2, 1/3."""
        assert [harmonic_weight(i) for i in range(3)] == [1.0, 0.5, pytest.approx(1 / 3)]

    def test_weighted_average(self):
        """Test weighted average and the zero-weight fallback."""
        assert calculate_weighted_average([(90, 1.0), (60, 0.5)]) == 80
        assert calculate_weighted_average([(90, 0)]) == 0.0
        assert calculate_weighted_average([]) == 0.0

    def test_is_number(self):
        """Test booleans and numeric strings are not numbers."""
        assert is_number(3)
        assert is_number(2.5)
        assert not is_number(True)
        assert not is_number("3")
        assert not is_number(None)


class TestParseStringList:
    """Test tolerant list parsing."""

    @pytest.mark.parametrize("value,expected", [
        (["tech", "new_age"], ["tech", "new_age"]),
        (("tech",), ["tech"]),
        ('["tech", "new_age"]', ["tech", "new_age"]),
        ("[]", []),
        (None, []),
        ("tech", ["tech"]),
        ("", [""]),
        ('"tech"', ['"tech"']),
        ('{"a": 1}', ['{"a": 1}']),
        (42, [42]),
    ])
    def test_parse(self, value, expected):
        """Test native, JSON-encoded and malformed values."""
        assert parse_string_list(value) == expected

    def test_deeply_nested_input(self):
        """Test input nested beyond the recursion limit is kept as raw text."""
        value = "[" * 100000

        assert parse_string_list(value) == [value]


class TestRiasecHelpers:
    """Test RIASEC utilities."""

    def test_percentages(self):
        """Test conversion to rounded, clamped percentages."""
        scores = {"R": 42, "I": 21, "A": 26.25, "S": -3, "E": 50}

        assert riasec_percentages(scores, 42) == {"R": 100, "I": 50, "A": 63, "S": 0, "E": 100, "C": 0}

    def test_percentages_zero_max(self):
        """Test a non-positive maximum yields zeros."""
        assert riasec_percentages({"R": 10}, 0) == {code: 0 for code in "RIASEC"}

    def test_top_dimensions(self):
        """Test top dimensions sorted by score."""
        top = get_top_dimensions({"R": 1, "I": 5, "A": 3, "S": 4}, top_n=2)

        assert top == [(RiasecDimension.INVESTIGATIVE, 5), (RiasecDimension.SOCIAL, 4)]

    def test_riasec_code_ties_keep_canonical_order(self):
        """Test equal scores keep R-I-A-S-E-C order."""
        assert get_riasec_code({}) == "RIA"
        assert get_riasec_code({"C": 2, "E": 2, "S": 1}) == "ECS"
