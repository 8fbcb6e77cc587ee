"""Host document interface and implementations."""

from .base import DocumentSource, MaterialRecord, ItemRecord
from .json_document import JsonDocument

__all__ = ["DocumentSource", "MaterialRecord", "ItemRecord", "JsonDocument"]
