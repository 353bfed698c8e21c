"""Exceptions raised by the profiling engine and its CSV ingestion."""


class ProfilerError(Exception):
    """Base class for every error raised by :mod:`table_profiler`."""


class InvalidInputError(ProfilerError, ValueError):
    """The table (or a call argument) is structurally malformed.

    Defined edge cases such as an empty table or a zero-width histogram
    range are *not* reported through this error.
    """


class IngestError(ProfilerError):
    """The uploaded CSV could not be parsed into a table."""
