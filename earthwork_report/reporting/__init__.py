"""Report rendering."""

from .reporter import VolumeReportRenderer, format_station, format_volume

__all__ = ["VolumeReportRenderer", "format_station", "format_volume"]
