"""Tests for table_profiler.table."""

import pandas as pd
import pytest

from table_profiler import ABSENT, InvalidInputError, Numeric, Table, Textual


class TestValidation:
    def test_duplicate_columns(self):
        with pytest.raises(InvalidInputError):
            Table.from_records(["a", "a"], [])

    def test_non_string_column(self):
        with pytest.raises(InvalidInputError):
            Table.from_records(["a", 1], [])

    def test_columns_must_be_a_sequence(self):
        with pytest.raises(InvalidInputError):
            Table(columns="ab")

    def test_row_must_be_mapping(self):
        with pytest.raises(InvalidInputError):
            Table.from_records(["a"], [["x"]])

    def test_unknown_row_key(self):
        with pytest.raises(InvalidInputError, match="outside the column list"):
            Table.from_records(["a"], [{"a": 1, "b": 2}])

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            Table.from_records(["a", "a"], [])


class TestAccess:
    def test_missing_keys_read_as_absent(self):
        table = Table.from_records(["a", "b"], [{"a": 1}])
        assert list(table.column_cells("b")) == [ABSENT]

    def test_values_are_wrapped(self):
        table = Table.from_records(["a", "b"], [{"a": 1, "b": "x"}])
        row = table.rows[0]
        assert table.cell(row, "a") == Numeric(1)
        assert table.cell(row, "b") == Textual("x")

    def test_unknown_column(self):
        table = Table.from_records(["a"], [])
        with pytest.raises(InvalidInputError):
            list(table.column_cells("zzz"))

    def test_rows_are_read_only(self):
        table = Table.from_records(["a"], [{"a": 1}])
        with pytest.raises(TypeError):
            table.rows[0]["a"] = 2

    def test_len(self, people_table):
        assert len(people_table) == 3
        assert people_table.columns == ("id", "age")


class TestFromDataFrame:
    def test_nan_and_none_become_absent(self):
        df = pd.DataFrame({"a": [1.0, None], "b": ["x", None]})
        table = Table.from_dataframe(df)
        assert table.columns == ("a", "b")
        assert list(table.column_cells("a")) == [Numeric(1.0), ABSENT]
        assert list(table.column_cells("b")) == [Textual("x"), ABSENT]

    def test_nullable_integers(self):
        df = pd.DataFrame({"n": pd.array([1, None], dtype="Int64")})
        table = Table.from_dataframe(df)
        assert list(table.column_cells("n")) == [Numeric(1), ABSENT]


class TestRowsValidation:
    @pytest.mark.parametrize("rows", [None, 5, "ab", {"a": 1}])
    def test_rows_must_be_a_sequence(self, rows):
        with pytest.raises(InvalidInputError):
            Table(columns=("a",), rows=rows)

    def test_from_records_none(self):
        with pytest.raises(InvalidInputError):
            Table.from_records(["a"], None)

    def test_generator_rows(self):
        table = Table.from_records(["a"], ({"a": i} for i in range(3)))
        assert len(table) == 3
