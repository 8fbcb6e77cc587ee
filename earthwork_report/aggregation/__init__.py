"""Volume aggregation."""

from .aggregator import VolumeAggregator

__all__ = ["VolumeAggregator"]
