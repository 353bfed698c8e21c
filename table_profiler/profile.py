"""
One-call profiling of a whole table.

Combines the per-column summaries into :class:`ColumnProfile` rows and the
dashboard header numbers into a :class:`TableOverview`.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from table_profiler.cells import canonical, display_text, is_absent
from table_profiler.classify import classify_columns
from table_profiler.config import DEFAULT_SETTINGS, ProfilerSettings
from table_profiler.models import ColumnProfile, TableOverview
from table_profiler.summaries import (
    count_distinct,
    count_nulls,
    find_duplicates,
    repeated_value_count,
)
from table_profiler.table import Table

__all__ = ["overview", "profile_table", "sample_values"]

logger = logging.getLogger(__name__)


def sample_values(table: Table, column: str, size: int) -> tuple:
    """First *size* distinct filled values of *column*, as display text."""
    samples = {}
    for cell in table.column_cells(column):
        if len(samples) >= size:
            break
        if not is_absent(cell):
            samples.setdefault(canonical(cell), display_text(cell))
    return tuple(samples.values())


def profile_table(table: Table, settings: ProfilerSettings = DEFAULT_SETTINGS) -> List[ColumnProfile]:
    nulls = count_nulls(table)
    distinct = count_distinct(table)
    types = classify_columns(table, settings)

    profiles = [
        ColumnProfile(
            name=column,
            null_count=n.null_count,
            null_percent=n.null_percent,
            distinct_count=d.distinct_count,
            inferred_type=types[column],
            repeated_value_count=repeated_value_count(table, column),
            sample_values=sample_values(table, column, settings.sample_size),
        )
        for column, n, d in zip(table.columns, nulls, distinct)
    ]
    logger.debug("Profiled %d columns over %d rows", len(profiles), len(table))
    return profiles


def overview(
    table: Table,
    settings: ProfilerSettings = DEFAULT_SETTINGS,
    profiles: Optional[Sequence[ColumnProfile]] = None,
) -> TableOverview:
    """Headline numbers for the table.

    Pass *profiles* from :func:`profile_table` to avoid rescanning columns.
    """
    if profiles is None:
        profiles = profile_table(table, settings)

    distribution = {}
    for p in profiles:
        key = p.inferred_type.value
        distribution[key] = distribution.get(key, 0) + 1

    return TableOverview(
        total_rows=len(table),
        total_columns=len(table.columns),
        total_nulls=sum(p.null_count for p in profiles),
        duplicate_rows=find_duplicates(table).duplicate_row_count,
        type_distribution=distribution,
    )
