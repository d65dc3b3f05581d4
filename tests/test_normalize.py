"""
Normalization Tests

min-max clamping, degenerate ranges, and tag overlap ratios.

Run:
----
    pytest tests/test_normalize.py -v
"""

import math

import pytest

from matchmaker.utils import clamp, exact_overlap_ratio, fuzzy_overlap_ratio, normalize


class TestNormalize:

    @pytest.mark.parametrize(
        "value,lo,hi,expected",
        [
            (5, 0, 10, 0.5),
            (0, 0, 10, 0.0),
            (10, 0, 10, 1.0),
            (-3, 0, 10, 0.0),
            (42, 0, 10, 1.0),
            (3, 1, 5, 0.5),
        ],
    )
    def test_linear_clamp(self, value, lo, hi, expected):
        assert normalize(value, lo, hi) == pytest.approx(expected)

    def test_degenerate_range_is_neutral(self):
        assert normalize(7, 3, 3) == 0.5
        assert normalize(0, 0, 0) == 0.5

    def test_clamp(self):
        assert clamp(1.7) == 1.0
        assert clamp(-0.2) == 0.0
        assert clamp(0.3) == 0.3


class TestOverlapRatios:

    def test_fuzzy_matches_substrings_both_ways_case_insensitive(self):
        assert fuzzy_overlap_ratio(["fashion"], ["Fashion & Style"]) == 1.0
        assert fuzzy_overlap_ratio(["Street Fashion"], ["fashion"]) == 1.0

    def test_fuzzy_denominator_is_larger_set(self):
        # 1 match out of max(1, 4)
        assert fuzzy_overlap_ratio(["Fashion"], ["Fashion", "Tech", "Food", "Travel"]) == 0.25

    def test_exact_requires_identical_tags(self):
        assert exact_overlap_ratio(["Mumbai"], ["mumbai"]) == 0.0
        assert exact_overlap_ratio(["Mumbai", "Delhi"], ["Mumbai"]) == 0.5

    @pytest.mark.parametrize("ratio", [fuzzy_overlap_ratio, exact_overlap_ratio])
    def test_both_empty_is_zero_not_nan(self, ratio):
        result = ratio([], [])
        assert result == 0.0
        assert not math.isnan(result)

    @pytest.mark.parametrize("ratio", [fuzzy_overlap_ratio, exact_overlap_ratio])
    def test_one_side_empty_is_zero(self, ratio):
        assert ratio(["Fashion"], []) == 0.0
        assert ratio([], ["Fashion"]) == 0.0
