"""Mini README: Error types raised by the ledger at its boundary.

All errors derive from ``LedgerError`` which is itself a ``ValueError`` so
callers that already guard against bad input keep working. The web and tool
layers translate these into client errors.
"""

from __future__ import annotations

from typing import Iterable


class LedgerError(ValueError):
    """Base class for rejected ledger requests."""


class InvalidDateRangeError(LedgerError):
    """Raised when a filter's start date sorts after its end date."""

    def __init__(self, start_date: str, end_date: str) -> None:
        super().__init__(f"startDate {start_date!r} is after endDate {end_date!r}")
        self.start_date = start_date
        self.end_date = end_date


class InvalidEnumValueError(LedgerError):
    """Raised when a value falls outside a closed set of labels."""

    def __init__(self, field: str, value: object, allowed: Iterable[str]) -> None:
        allowed_labels = ", ".join(allowed)
        super().__init__(f"Unsupported {field}: {value!r} (expected one of: {allowed_labels})")
        self.field = field
        self.value = value


class MalformedDateError(LedgerError):
    """Raised when a date string cannot be parsed as ISO-8601."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Date {value!r} is not a valid ISO-8601 date")
        self.value = value
