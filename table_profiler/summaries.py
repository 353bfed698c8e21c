"""
Completeness, cardinality and duplicate-row summaries.

Every function here is a pure scan over a :class:`~table_profiler.table.Table`
and returns results in the table's column order.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from typing import Dict, List, Mapping, Optional

from table_profiler.cells import Cell, canonical, display_text, is_absent
from table_profiler.models import DistinctCount, DuplicateSummary, NullCount, ValueCount
from table_profiler.table import Table

__all__ = [
    "count_distinct",
    "count_nulls",
    "duplicate_row_indices",
    "find_duplicates",
    "repeated_value_count",
    "row_key",
    "value_counts",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------

def null_percent(null_count: int, total_rows: int) -> float:
    return null_count / total_rows * 100 if total_rows else 0.0


def count_nulls(table: Table) -> List[NullCount]:
    """Missing cells per column, with their share of all rows."""
    total = len(table)
    result = []
    for column in table.columns:
        n = sum(1 for cell in table.column_cells(column) if is_absent(cell))
        result.append(NullCount(column=column, null_count=n, null_percent=null_percent(n, total)))
    return result


# ---------------------------------------------------------------------------
# Cardinality
# ---------------------------------------------------------------------------

def count_distinct(table: Table) -> List[DistinctCount]:
    """Distinct canonical values per column; missing counts as one value."""
    return [
        DistinctCount(
            column=column,
            distinct_count=len({canonical(cell) for cell in table.column_cells(column)}),
        )
        for column in table.columns
    ]


def repeated_value_count(table: Table, column: str) -> int:
    """Non-missing cells of *column* equal to an earlier cell of it."""
    seen = set()
    repeats = 0
    for cell in table.column_cells(column):
        if is_absent(cell):
            continue
        key = canonical(cell)
        if key in seen:
            repeats += 1
        else:
            seen.add(key)
    return repeats


def value_counts(table: Table, column: str, limit: Optional[int] = None) -> List[ValueCount]:
    """Frequency of each value in *column*, most frequent first.

    Ties keep first-seen order. Missing cells are tallied under
    :data:`~table_profiler.cells.ABSENT_KEY`.
    """
    counts: Counter = Counter()
    labels: Dict[str, str] = {}
    for cell in table.column_cells(column):
        key = canonical(cell)
        if key not in labels:
            labels[key] = display_text(cell)
        counts[key] += 1
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    if limit is not None:
        ranked = ranked[:limit]
    return [ValueCount(value=labels[key], count=n) for key, n in ranked]


# ---------------------------------------------------------------------------
# Duplicate rows
# ---------------------------------------------------------------------------

def row_key(table: Table, row: Mapping[str, Cell]) -> str:
    """JSON list of ``[column, canonical value]`` pairs over all columns."""
    return json.dumps(
        [[column, canonical(table.cell(row, column))] for column in table.columns],
        ensure_ascii=False,
    )


def duplicate_row_indices(table: Table) -> List[int]:
    """Positions of rows whose key matches an earlier row (first copy excluded)."""
    seen = set()
    duplicates = []
    for position, row in enumerate(table.rows):
        key = row_key(table, row)
        if key in seen:
            duplicates.append(position)
        seen.add(key)
    return duplicates


def find_duplicates(table: Table) -> DuplicateSummary:
    duplicates = duplicate_row_indices(table)
    logger.debug("Found %d duplicate rows out of %d", len(duplicates), len(table))
    return DuplicateSummary(duplicate_row_count=len(duplicates), total_row_count=len(table))
