"""
Cell values and the primitives every summarizer shares.

A cell is one of three tagged variants:

* :class:`Absent`: null, ``None``, ``pd.NA``, empty text or a NaN number.
* :class:`Numeric`: an int or float decoded by the ingestion layer.
* :class:`Textual`: anything else, kept as text.

:func:`is_absent` is the only missingness rule in the package, and
:func:`canonical` is the only equality encoding (used for distinct values
*and* duplicate rows).
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Optional, Union

import pandas as pd

__all__ = [
    "ABSENT",
    "ABSENT_KEY",
    "Absent",
    "Cell",
    "Numeric",
    "Textual",
    "canonical",
    "coerce_number",
    "display_text",
    "is_absent",
    "to_cell",
]


@dataclass(frozen=True)
class Absent:
    """Missing value marker."""


@dataclass(frozen=True)
class Numeric:
    value: Union[int, float]


@dataclass(frozen=True)
class Textual:
    value: str


Cell = Union[Absent, Numeric, Textual]

ABSENT = Absent()

ABSENT_KEY = "<NA>"
"""Canonical form shared by every absent cell, so missing counts as one value."""


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def to_cell(raw: Any) -> Cell:
    """Wrap a decoded value as a :data:`Cell`.

    Python/numpy numbers become :class:`Numeric`; booleans, timestamps and
    other objects are kept as their text so they never count as numbers.
    """
    if isinstance(raw, (Absent, Numeric, Textual)):
        cell = raw
    elif raw is None or raw is pd.NA or raw is pd.NaT:
        return ABSENT
    elif isinstance(raw, bool):
        cell = Textual(str(raw))
    elif isinstance(raw, numbers.Integral):
        cell = Numeric(int(raw))
    elif isinstance(raw, numbers.Real):
        cell = Numeric(float(raw))
    elif isinstance(raw, str):
        cell = Textual(raw)
    else:
        cell = Textual(str(raw))
    return ABSENT if is_absent(cell) else cell


# ---------------------------------------------------------------------------
# Shared predicates
# ---------------------------------------------------------------------------

def is_absent(cell: Cell) -> bool:
    """Return True iff *cell* is missing."""
    if isinstance(cell, Absent):
        return True
    if isinstance(cell, Numeric):
        return isinstance(cell.value, float) and math.isnan(cell.value)
    return cell.value == ""


def coerce_number(cell: Cell) -> Optional[float]:
    """Return the finite number *cell* holds or parses to, else None.

    Text is parsed with ``float()`` after trimming whitespace; digit
    separators (``1_000``) and non-finite spellings (``inf``, ``nan``) are
    rejected.
    """
    if is_absent(cell):
        return None
    if isinstance(cell, Numeric):
        try:
            value = float(cell.value)
        except OverflowError:
            return None
    else:
        text = cell.value.strip()
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


# ---------------------------------------------------------------------------
# Canonical encoding
# ---------------------------------------------------------------------------

def _number_text(value: Union[int, float]) -> str:
    # 1, 1.0 and -0.0 must encode alike
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def canonical(cell: Cell) -> str:
    """Type-tagged string used for equality and hashing.

    ``n:`` prefixes numbers and ``s:`` prefixes text, so the text ``"1"``
    and the number ``1`` stay distinct while ``1`` and ``1.0`` collapse.
    """
    if is_absent(cell):
        return ABSENT_KEY
    if isinstance(cell, Numeric):
        return "n:" + _number_text(cell.value)
    return "s:" + cell.value


def display_text(cell: Cell) -> str:
    """Untagged text for samples and frequency tables."""
    if is_absent(cell):
        return ABSENT_KEY
    if isinstance(cell, Numeric):
        return _number_text(cell.value)
    return cell.value
