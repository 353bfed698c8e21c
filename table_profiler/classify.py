"""
Column type inference.

A column is ``numeric`` when more than 90% of its filled cells are numbers,
otherwise ``date`` when more than 80% parse as a calendar date, otherwise
``string``. A column with no filled cells is ``empty``. The numeric test
always runs first: a lenient date parser accepts many plain numbers too.
"""

from __future__ import annotations

import logging
from typing import Dict, List

import pandas as pd

from table_profiler.cells import coerce_number, display_text, is_absent
from table_profiler.config import DEFAULT_SETTINGS, ProfilerSettings
from table_profiler.models import ColumnType
from table_profiler.table import Table

__all__ = ["classify_column", "classify_columns", "count_dates"]

logger = logging.getLogger(__name__)


def count_dates(texts: List[str]) -> int:
    """How many of *texts* pandas can parse as a date/time."""
    if not texts:
        return 0
    parsed = pd.to_datetime(
        pd.Series(texts, dtype="object"), errors="coerce", format="mixed", utc=True,
    )
    return int(parsed.notna().sum())


def classify_column(
    table: Table, column: str, settings: ProfilerSettings = DEFAULT_SETTINGS,
) -> ColumnType:
    total = 0
    numeric = 0
    leftovers = []
    for cell in table.column_cells(column):
        if is_absent(cell):
            continue
        total += 1
        if coerce_number(cell) is not None:
            numeric += 1
        else:
            leftovers.append(display_text(cell))

    if total == 0:
        return ColumnType.EMPTY
    if numeric / total > settings.numeric_threshold:
        return ColumnType.NUMERIC
    if count_dates(leftovers) / total > settings.date_threshold:
        return ColumnType.DATE
    return ColumnType.STRING


def classify_columns(
    table: Table, settings: ProfilerSettings = DEFAULT_SETTINGS,
) -> Dict[str, ColumnType]:
    """Inferred type of every column, keyed in column order."""
    types = {column: classify_column(table, column, settings) for column in table.columns}
    logger.debug("Classified %d columns: %s", len(types), {k: v.value for k, v in types.items()})
    return types
