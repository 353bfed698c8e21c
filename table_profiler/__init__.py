"""
Table profiler: summary statistics for an uploaded CSV.

Pure functions over an immutable :class:`Table`: per-column null and
distinct counts, type inference, duplicate-row detection and numeric
histograms. The Streamlit pages (``Home.py`` and ``pages/``) only render
what these return.

Quick start::

    from table_profiler import Table, profile_table, build_histogram
    table = Table.from_records(["id", "age"], [{"id": "1", "age": 30}])
    profile_table(table)
"""

from table_profiler.cells import ABSENT, Absent, Cell, Numeric, Textual, is_absent
from table_profiler.classify import classify_column, classify_columns
from table_profiler.config import DEFAULT_SETTINGS, ProfilerSettings
from table_profiler.errors import IngestError, InvalidInputError, ProfilerError
from table_profiler.histogram import build_histogram
from table_profiler.models import (
    ColumnProfile,
    ColumnType,
    DistinctCount,
    DuplicateSummary,
    HistogramBin,
    NullCount,
    TableOverview,
    ValueCount,
)
from table_profiler.profile import overview, profile_table
from table_profiler.summaries import (
    count_distinct,
    count_nulls,
    duplicate_row_indices,
    find_duplicates,
    value_counts,
)
from table_profiler.table import Table

__all__ = [
    "ABSENT",
    "Absent",
    "Cell",
    "ColumnProfile",
    "ColumnType",
    "DEFAULT_SETTINGS",
    "DistinctCount",
    "DuplicateSummary",
    "HistogramBin",
    "IngestError",
    "InvalidInputError",
    "NullCount",
    "Numeric",
    "ProfilerError",
    "ProfilerSettings",
    "Table",
    "TableOverview",
    "Textual",
    "ValueCount",
    "build_histogram",
    "classify_column",
    "classify_columns",
    "count_distinct",
    "count_nulls",
    "duplicate_row_indices",
    "find_duplicates",
    "is_absent",
    "overview",
    "profile_table",
    "value_counts",
]
__version__ = "1.0.0"
