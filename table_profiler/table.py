"""
Immutable in-memory table handed to every profiling function.

The ingestion layer builds one :class:`Table` per uploaded file; profiling
functions never mutate it and never read any other state, so profiles are
always recomputed from scratch against the current snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Sequence, Tuple

import pandas as pd

from table_profiler.cells import ABSENT, Cell, to_cell
from table_profiler.errors import InvalidInputError

__all__ = ["Table"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Table:
    """Ordered column names plus a sequence of row records.

    Raw values are converted with :func:`~table_profiler.cells.to_cell` on
    construction. A record may omit columns (read as absent) but must not
    carry keys outside :attr:`columns`.
    """

    columns: Tuple[str, ...]
    rows: Tuple[Mapping, ...] = ()

    def __post_init__(self) -> None:
        columns = _validate_columns(self.columns)
        if isinstance(self.rows, (str, bytes, Mapping)) or not isinstance(self.rows, Iterable):
            raise InvalidInputError("rows must be a sequence of row mappings")
        known = set(columns)
        rows = []
        for position, record in enumerate(self.rows):
            if not isinstance(record, Mapping):
                raise InvalidInputError(
                    f"Row {position} is a {type(record).__name__}, expected a mapping"
                )
            unknown = [key for key in record if key not in known]
            if unknown:
                raise InvalidInputError(
                    f"Row {position} has keys outside the column list: {unknown!r}"
                )
            rows.append(MappingProxyType({key: to_cell(value) for key, value in record.items()}))
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", tuple(rows))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_records(cls, columns: Sequence[str], records: Iterable[Mapping]) -> "Table":
        return cls(columns=columns, rows=records)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "Table":
        """Snapshot a parsed DataFrame (columns in frame order)."""
        columns = tuple(str(c) for c in df.columns)
        records = [dict(zip(columns, values)) for values in df.itertuples(index=False, name=None)]
        table = cls(columns=columns, rows=tuple(records))
        logger.debug("Built table with %d rows x %d columns", len(table), len(columns))
        return table

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.rows)

    def require_column(self, name: str) -> None:
        if name not in self.columns:
            raise InvalidInputError(f"Unknown column {name!r}; table has {list(self.columns)!r}")

    def cell(self, row: Mapping, column: str) -> Cell:
        return row.get(column, ABSENT)

    def column_cells(self, name: str) -> Iterator[Cell]:
        """Yield every cell of column *name* in row order."""
        self.require_column(name)
        for row in self.rows:
            yield row.get(name, ABSENT)


def _validate_columns(columns: Any) -> Tuple[str, ...]:
    if isinstance(columns, (str, bytes)) or not isinstance(columns, Iterable):
        raise InvalidInputError("columns must be a sequence of column names")
    columns = tuple(columns)
    seen = set()
    for name in columns:
        if not isinstance(name, str):
            raise InvalidInputError(f"Column name {name!r} is not a string")
        if name in seen:
            raise InvalidInputError(f"Duplicate column name {name!r}")
        seen.add(name)
    return columns
