"""
CSV upload -> :class:`~table_profiler.table.Table`.

Handles delimiter sniffing, BOM and header cleanup, and common NA tokens.
pandas decodes numeric columns to numbers; everything else stays text.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from typing import Tuple, Union

import pandas as pd

from table_profiler.config import DEFAULT_SETTINGS, ProfilerSettings
from table_profiler.errors import IngestError
from table_profiler.table import Table

__all__ = ["read_csv_frame", "read_csv_table"]

logger = logging.getLogger(__name__)

_UNNAMED = r"^Unnamed(:\s*\d+)?$"


def read_csv_frame(
    raw: Union[bytes, str], settings: ProfilerSettings = DEFAULT_SETTINGS,
) -> Tuple[pd.DataFrame, int]:
    """Parse CSV text/bytes; return the frame and how many junk columns were dropped."""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")

    try:
        df = pd.read_csv(
            io.StringIO(raw),
            sep=None,                # autodetect delimiter
            engine="python",
            na_values=list(settings.na_values),
            keep_default_na=True,
            skip_blank_lines=True,
            quoting=csv.QUOTE_MINIMAL,
            skipinitialspace=True,
            on_bad_lines="warn",
            header=0,
        )
    except (ValueError, csv.Error) as e:
        # pandas ParserError / EmptyDataError are ValueErrors
        raise IngestError(f"Could not parse CSV: {e}") from e

    # normalise headers
    df.columns = (
        df.columns.astype(str)
          .str.replace(r"^\ufeff", "", regex=True)   # strip BOM
          .str.strip()
    )

    # drop unnamed columns left by trailing delimiters; named empty columns stay
    before_cols = df.shape[1]
    unnamed = df.columns.str.match(_UNNAMED, flags=re.I)
    df = df.loc[:, ~(unnamed & df.isna().all().to_numpy())]
    dropped_cols = before_cols - df.shape[1]
    if dropped_cols:
        logger.warning("Dropped %d empty/unnamed columns", dropped_cols)

    logger.info("Parsed CSV: %d rows x %d columns", df.shape[0], df.shape[1])
    return df, dropped_cols


def read_csv_table(
    raw: Union[bytes, str], settings: ProfilerSettings = DEFAULT_SETTINGS,
) -> Tuple[Table, pd.DataFrame, int]:
    """Parse an upload into a table, keeping the frame for previews."""
    df, dropped_cols = read_csv_frame(raw, settings)
    if df.columns.duplicated().any():
        raise IngestError("CSV header has duplicate column names after cleanup")
    return Table.from_dataframe(df), df, dropped_cols
