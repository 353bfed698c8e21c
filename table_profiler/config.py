"""
Tunables for the profiling engine.

Cutoffs match the classification policy the dashboard has always used;
change them through a new :class:`ProfilerSettings`, not by editing callers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfilerSettings:
    """Immutable configuration container."""

    # ── Type classification ────────────────────────────────────────────
    numeric_threshold: float = 0.9
    """Share of non-missing cells that must coerce to a number (strictly above)."""
    date_threshold: float = 0.8
    """Share of non-missing cells that must parse as a date (strictly above)."""

    # ── Histogram ──────────────────────────────────────────────────────
    default_bin_count: int = 12

    # ── Column samples ─────────────────────────────────────────────────
    sample_size: int = 5

    # ── CSV ingestion ──────────────────────────────────────────────────
    na_values: tuple = ("", " ", "NA", "N/A", "na", "n/a", "?", "-", "--")


DEFAULT_SETTINGS = ProfilerSettings()
