"""Tests for table_profiler.summaries."""

import itertools

import pytest

from table_profiler import Table
from table_profiler.summaries import (
    count_distinct,
    count_nulls,
    duplicate_row_indices,
    find_duplicates,
    repeated_value_count,
    row_key,
    value_counts,
)


# ── completeness ─────────────────────────────────────────────────────

class TestCountNulls:
    def test_people(self, people_table):
        nulls = {n.column: n for n in count_nulls(people_table)}
        assert nulls["id"].null_count == 0
        assert nulls["id"].null_percent == 0
        assert nulls["age"].null_count == 1
        assert nulls["age"].null_percent == pytest.approx(100 / 3)

    def test_keeps_column_order(self, people_table):
        assert [n.column for n in count_nulls(people_table)] == ["id", "age"]

    def test_empty_table_has_zero_percent(self, empty_table):
        assert [(n.null_count, n.null_percent) for n in count_nulls(empty_table)] == [(0, 0), (0, 0)]

    def test_every_absent_form_counts(self):
        table = Table.from_records(
            ["a"], [{"a": None}, {"a": ""}, {"a": float("nan")}, {}, {"a": 0}],
        )
        [n] = count_nulls(table)
        assert n.null_count == 4
        assert 0 <= n.null_percent <= 100


# ── cardinality ──────────────────────────────────────────────────────

class TestCountDistinct:
    def test_people(self, people_table):
        distinct = {d.column: d.distinct_count for d in count_distinct(people_table)}
        # age: 30 and blank
        assert distinct == {"id": 2, "age": 2}

    def test_int_and_float_spellings_collapse(self):
        table = Table.from_records(["x"], [{"x": 1}, {"x": 1.0}, {"x": 2}])
        assert count_distinct(table)[0].distinct_count == 2

    def test_text_and_number_stay_apart(self):
        table = Table.from_records(["x"], [{"x": 1}, {"x": "1"}])
        assert count_distinct(table)[0].distinct_count == 2

    def test_all_blank_is_one_value(self):
        table = Table.from_records(["x"], [{"x": None}, {"x": ""}, {}])
        assert count_distinct(table)[0].distinct_count == 1

    def test_empty_table(self, empty_table):
        assert [d.distinct_count for d in count_distinct(empty_table)] == [0, 0]

    def test_repeated_value_count_ignores_blanks(self):
        table = Table.from_records(["x"], [{"x": "a"}, {"x": "a"}, {"x": ""}, {"x": ""}, {"x": "b"}])
        assert repeated_value_count(table, "x") == 1


class TestValueCounts:
    def test_most_frequent_first(self):
        table = Table.from_records(["x"], [{"x": "a"}, {"x": "b"}, {"x": "a"}, {"x": None}])
        assert [(v.value, v.count) for v in value_counts(table, "x")] == [
            ("a", 2), ("b", 1), ("<NA>", 1),
        ]

    def test_limit(self):
        table = Table.from_records(["x"], [{"x": i} for i in range(10)])
        assert len(value_counts(table, "x", limit=3)) == 3


# ── duplicate rows ───────────────────────────────────────────────────

class TestDuplicates:
    def test_people(self, people_table):
        summary = find_duplicates(people_table)
        assert summary.duplicate_row_count == 1
        assert summary.total_row_count == 3
        assert duplicate_row_indices(people_table) == [2]

    def test_first_occurrence_never_counted(self):
        table = Table.from_records(["a"], [{"a": "x"}] * 4)
        assert duplicate_row_indices(table) == [1, 2, 3]

    def test_whole_row_must_match(self):
        table = Table.from_records(["a", "b"], [{"a": 1, "b": 1}, {"a": 1, "b": 2}])
        assert find_duplicates(table).duplicate_row_count == 0

    def test_missing_key_equals_blank(self):
        table = Table.from_records(["a", "b"], [{"a": 1}, {"a": 1, "b": ""}, {"a": 1, "b": None}])
        assert find_duplicates(table).duplicate_row_count == 2

    def test_text_one_is_not_number_one(self):
        table = Table.from_records(["a"], [{"a": "1"}, {"a": 1}])
        assert find_duplicates(table).duplicate_row_count == 0

    def test_row_key_is_unambiguous(self):
        # a naive "a,b" join would make these two rows collide
        table = Table.from_records(["a", "b"], [{"a": "x,y", "b": "z"}, {"a": "x", "b": "y,z"}])
        first, second = table.rows
        assert row_key(table, first) != row_key(table, second)

    def test_empty_table(self, empty_table):
        summary = find_duplicates(empty_table)
        assert (summary.duplicate_row_count, summary.total_row_count) == (0, 0)

    def test_count_is_permutation_invariant(self):
        records = [{"a": 1}, {"a": 2}, {"a": 1}, {"a": "1"}, {"a": 2}]
        for perm in itertools.permutations(records):
            table = Table.from_records(["a"], perm)
            unique_keys = {row_key(table, row) for row in table.rows}
            assert find_duplicates(table).duplicate_row_count == len(records) - len(unique_keys) == 2

    def test_to_dict(self, people_table):
        assert find_duplicates(people_table).to_dict() == {
            "duplicate_row_count": 1,
            "total_row_count": 3,
        }
