"""Shared fixtures for the profiler tests."""

import pytest

from table_profiler import Table


@pytest.fixture
def people_table() -> Table:
    """id/age table with one blank age and one repeated row."""
    return Table.from_records(
        ["id", "age"],
        [
            {"id": "1", "age": 30},
            {"id": "2", "age": ""},
            {"id": "1", "age": 30},
        ],
    )


@pytest.fixture
def empty_table() -> Table:
    return Table.from_records(["a", "b"], [])
