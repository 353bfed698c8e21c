"""
Result records returned by the profiling engine.

All of them are frozen dataclasses with a ``to_dict()`` that yields plain
Python values (enums flattened to their string value), ready to hand to a
chart or a JSON encoder. No sorting or formatting is applied here.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

__all__ = [
    "ColumnProfile",
    "ColumnType",
    "DistinctCount",
    "DuplicateSummary",
    "HistogramBin",
    "NullCount",
    "TableOverview",
    "ValueCount",
]


class ColumnType(str, Enum):
    NUMERIC = "numeric"
    DATE = "date"
    STRING = "string"
    EMPTY = "empty"


def _plain(items: List[Tuple[str, Any]]) -> Dict[str, Any]:
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in items}


class _Result:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self, dict_factory=_plain)


@dataclass(frozen=True)
class NullCount(_Result):
    column: str
    null_count: int
    null_percent: float
    """``null_count / total_rows * 100``; 0 for a table without rows."""


@dataclass(frozen=True)
class DistinctCount(_Result):
    column: str
    distinct_count: int


@dataclass(frozen=True)
class DuplicateSummary(_Result):
    duplicate_row_count: int
    total_row_count: int


@dataclass(frozen=True)
class ValueCount(_Result):
    value: str
    count: int


@dataclass(frozen=True)
class HistogramBin(_Result):
    """``[lower_bound, upper_bound)``; the last bin of a histogram is closed."""

    lower_bound: float
    upper_bound: float
    count: int


@dataclass(frozen=True)
class ColumnProfile(_Result):
    name: str
    null_count: int
    null_percent: float
    distinct_count: int
    inferred_type: ColumnType
    repeated_value_count: int = 0
    """Non-missing cells whose value already appeared higher up the column."""
    sample_values: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TableOverview(_Result):
    total_rows: int
    total_columns: int
    total_nulls: int
    duplicate_rows: int
    type_distribution: Dict[str, int] = field(default_factory=dict)
    """Inferred type value -> number of columns, in first-seen column order."""
