"""Errors raised while building reports."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for failures that abort a report without writing output."""


class EmptyDataError(ReportError):
    """The data source returned no usable records."""


class MalformedDataError(ReportError):
    """The input could not be read as the expected record shape."""


class ZeroTotalError(ReportError):
    """Activity minutes sum to zero, so no chart can be drawn."""

    def __init__(self, message: str = "Total work time is zero. Cannot create a chart.") -> None:
        super().__init__(message)
