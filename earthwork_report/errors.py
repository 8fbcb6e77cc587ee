"""Exception types raised across the report pipeline.

Selection errors abort a command. No-data errors are soft and end the
command with a notice. Collection and extraction faults are raised by
document sources and contained by the collector/aggregator, which turn
them into recorded faults.
"""

from typing import Optional


class EarthworkReportError(Exception):
    """Base class for all report errors."""


class SelectionError(EarthworkReportError):
    """No alignment was selected, or the selection is not an alignment."""


class NoDataError(EarthworkReportError):
    """The alignment resolved but there is nothing to report."""

    def __init__(self, message: str, faults: Optional[list] = None):
        super().__init__(message)
        self.faults = list(faults or [])


class CollectionFault(EarthworkReportError):
    """A material list (or the list collection) could not be read."""

    def __init__(self, message: str, record_id: Optional[str] = None):
        super().__init__(message)
        self.record_id = record_id


class ExtractionFault(EarthworkReportError):
    """Quantities for a material list item could not be read."""

    def __init__(self, message: str, record_id: Optional[str] = None):
        super().__init__(message)
        self.record_id = record_id
