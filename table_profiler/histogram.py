"""
Equal-width histograms over a column's numeric values.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import List, Optional

from table_profiler.cells import coerce_number
from table_profiler.config import DEFAULT_SETTINGS, ProfilerSettings
from table_profiler.errors import InvalidInputError
from table_profiler.models import HistogramBin
from table_profiler.table import Table

__all__ = ["build_histogram", "numeric_values"]

logger = logging.getLogger(__name__)


def numeric_values(table: Table, column: str) -> List[float]:
    """Finite numbers in *column*; missing and unparseable cells are skipped."""
    values = []
    for cell in table.column_cells(column):
        value = coerce_number(cell)
        if value is not None:
            values.append(value)
    return values


def build_histogram(
    table: Table,
    column: str,
    bin_count: Optional[int] = None,
    settings: ProfilerSettings = DEFAULT_SETTINGS,
) -> List[HistogramBin]:
    """Bucket *column* into ``bin_count`` equal-width bins over ``[min, max]``.

    Returns an empty list when the column holds no numbers. When every
    value is identical the bin width falls back to 1 and all values land
    in the first bin. Otherwise the last bin ends exactly at the maximum.
    """
    if bin_count is None:
        bin_count = settings.default_bin_count
    if isinstance(bin_count, bool) or not isinstance(bin_count, numbers.Integral) or bin_count < 1:
        raise InvalidInputError(f"bin_count must be a positive integer, got {bin_count!r}")
    bin_count = int(bin_count)

    values = numeric_values(table, column)
    if not values:
        return []

    lo, hi = min(values), max(values)
    width = (hi - lo) / bin_count
    if not math.isfinite(width):
        # hi - lo overflowed
        width = hi / bin_count - lo / bin_count
    unit_width = width == 0
    if unit_width:
        width = 1.0

    counts = [0] * bin_count
    for value in values:
        position = (value - lo) / width
        if not math.isfinite(position):
            position = value / width - lo / width
        index = math.floor(position) if math.isfinite(position) else bin_count - 1
        # rounding can push the maximum one past the last bin
        counts[min(max(index, 0), bin_count - 1)] += 1

    logger.debug("Histogram for %r: %d values in %d bins", column, len(values), bin_count)
    last = bin_count - 1
    return [
        HistogramBin(
            lower_bound=lo + i * width if i else lo,
            upper_bound=hi if i == last and not unit_width else lo + (i + 1) * width,
            count=n,
        )
        for i, n in enumerate(counts)
    ]
