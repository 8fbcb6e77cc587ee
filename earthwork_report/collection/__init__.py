"""Material list collection."""

from .collector import MaterialListCollector, CollectionResult

__all__ = ["MaterialListCollector", "CollectionResult"]
