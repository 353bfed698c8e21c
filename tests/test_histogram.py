"""Tests for table_profiler.histogram."""

import math

import numpy as np
import pytest

from table_profiler import InvalidInputError, Table
from table_profiler.histogram import build_histogram, numeric_values


def _column(values):
    return Table.from_records(["c"], [{"c": v} for v in values])


class TestBuildHistogram:
    def test_skewed_values(self):
        bins = build_histogram(_column([1, 2, 2, 3, 100]), "c", bin_count=4)
        assert [b.count for b in bins] == [4, 0, 0, 1]
        edges = [b.lower_bound for b in bins] + [bins[-1].upper_bound]
        assert edges == pytest.approx([1, 25.75, 50.5, 75.25, 100])

    def test_bins_are_contiguous(self):
        bins = build_histogram(_column([0.1, 0.7, 3.3, 9.9]), "c", bin_count=7)
        assert len(bins) == 7
        for left, right in zip(bins, bins[1:]):
            assert left.upper_bound == right.lower_bound

    def test_maximum_lands_in_last_bin(self):
        bins = build_histogram(_column([0.1, 0.2, 0.3]), "c", bin_count=3)
        assert bins[-1].count >= 1
        assert sum(b.count for b in bins) == 3

    def test_identical_values_use_unit_width(self):
        bins = build_histogram(_column([5, 5, 5]), "c", bin_count=3)
        assert [(b.lower_bound, b.upper_bound, b.count) for b in bins] == [
            (5, 6, 3), (6, 7, 0), (7, 8, 0),
        ]

    def test_counts_only_numbers(self):
        table = _column([1, "2", None, "", "abc", float("nan"), "inf", 10])
        bins = build_histogram(table, "c", bin_count=5)
        assert sum(b.count for b in bins) == len(numeric_values(table, "c")) == 3

    def test_non_numeric_column_is_empty(self):
        assert build_histogram(_column(["a", "b"]), "c") == []

    def test_blank_column_is_empty(self):
        assert build_histogram(_column([None, ""]), "c", bin_count=4) == []

    def test_empty_table(self, empty_table):
        assert build_histogram(empty_table, "a") == []

    def test_default_bin_count(self):
        assert len(build_histogram(_column(range(50)), "c")) == 12

    @pytest.mark.parametrize("bad", [0, -1, 2.5, True, "4"])
    def test_bad_bin_count(self, bad):
        with pytest.raises(InvalidInputError):
            build_histogram(_column([1, 2]), "c", bin_count=bad)

    def test_unknown_column(self):
        with pytest.raises(InvalidInputError):
            build_histogram(_column([1, 2]), "nope", bin_count=2)

    def test_to_dict(self):
        [b] = build_histogram(_column([1, 3]), "c", bin_count=1)
        assert b.to_dict() == {"lower_bound": 1, "upper_bound": 3, "count": 2}

    def test_last_bin_ends_at_maximum(self):
        values = [-6.723, 26.228, -49.789, -5.461, 22.154]
        bins = build_histogram(_column(values), "c", bin_count=8)
        assert bins[0].lower_bound == min(values)
        assert bins[-1].upper_bound == max(values)

    def test_range_wider_than_float_max(self):
        bins = build_histogram(_column(["-1e308", "1e308", "5"]), "c", bin_count=4)
        assert [b.count for b in bins] == [1, 0, 1, 1]
        assert bins[0].lower_bound == -1e308
        assert bins[-1].upper_bound == 1e308
        assert all(math.isfinite(b.lower_bound) and math.isfinite(b.upper_bound) for b in bins)

    def test_range_wider_than_float_max_single_bin(self):
        [b] = build_histogram(_column(["-1e308", "1e308", "5"]), "c", bin_count=1)
        assert (b.lower_bound, b.upper_bound, b.count) == (-1e308, 1e308, 3)

    def test_numpy_integer_bin_count(self):
        bins = build_histogram(_column([1, 2, 3]), "c", bin_count=np.int64(3))
        assert [b.count for b in bins] == [1, 1, 1]
