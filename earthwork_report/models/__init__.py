"""Data models for earthwork volume reporting."""

from .schema import Alignment, QuantityRecord, VolumeRow, Fault, ReportTable

__all__ = ["Alignment", "QuantityRecord", "VolumeRow", "Fault", "ReportTable"]
