"""
Seeding Exception Hierarchy

Each stage of the seeding pipeline raises a specific error type so the
orchestrator can decide whether a fault is row-level (recovered in place)
or source-level (recorded as that source's failure).
"""
from pathlib import Path
from typing import Optional


class SeedingError(Exception):
    """Base exception for all seeding failures."""


class ConfigurationInvalidError(SeedingError):
    """Raised when seed flags or the base path are malformed."""


class SourceNotFoundError(SeedingError):
    """Raised when a source file is missing at its expected path."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Source file not found: {path}")


class SourceReadError(SeedingError):
    """Raised for I/O or text decoding failures while reading a source."""


class SourceFormatError(SeedingError):
    """Raised when a source has no header line or lacks required columns."""


class StoreFaultError(SeedingError):
    """Raised when the backing store fails a count, delete or save."""


class RowRejectedError(SeedingError):
    """
    Raised by an entity mapper when a single row cannot become a record.

    Attributes:
        column: Header name of the offending field
        reason: Short description of why the row was rejected
        raw: Raw text of the rejected line
        line_number: 1-based physical line number in the source file
    """

    def __init__(
        self,
        column: str,
        reason: str,
        raw: str = "",
        line_number: Optional[int] = None,
    ):
        self.column = column
        self.reason = reason
        self.raw = raw
        self.line_number = line_number
        super().__init__(f"{reason} (column '{column}')")
