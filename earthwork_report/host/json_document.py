"""Document source backed by a JSON export of a design document.

Expected layout:

    {
      "alignments": [{"id": "AL-1", "name": "Main Road"}],
      "material_lists": [
        {"id": "ML-1", "name": "Earthworks", "alignment_id": "AL-1",
         "items": [
           {"id": "IT-1", "name": "Topsoil",
            "quantities": [{"station_start": 0.0, "station_end": 20.0,
                            "cut_volume": 10.0, "fill_volume": 4.0}]}
         ]}
      ]
    }

Records are validated lazily, when the pipeline reads them, so one
malformed entry only affects the list or item that contains it.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from pydantic import ValidationError

from ..errors import CollectionFault, ExtractionFault
from ..models.schema import Alignment, QuantityRecord
from .base import DocumentSource, ItemRecord, MaterialRecord

logger = logging.getLogger(__name__)


class JsonItemRecord(ItemRecord):
    """Material list item read from a JSON entry."""

    def __init__(self, raw: Any, fallback_id: str):
        self._raw = raw if isinstance(raw, dict) else {}
        self._valid = isinstance(raw, dict)
        self._record_id = str(self._raw.get('id') or fallback_id)

    @property
    def record_id(self) -> str:
        return self._record_id

    @property
    def name(self) -> str:
        return str(self._raw.get('name') or '')

    def read_quantities(self) -> List[QuantityRecord]:
        if not self._valid:
            raise ExtractionFault("Item entry is not an object", self.record_id)

        raw_quantities = self._raw.get('quantities')
        if not isinstance(raw_quantities, list):
            raise ExtractionFault("Item has no quantities array", self.record_id)

        quantities = []
        for index, raw_quantity in enumerate(raw_quantities):
            try:
                quantities.append(QuantityRecord.model_validate(raw_quantity))
            except ValidationError as e:
                raise ExtractionFault(
                    f"Invalid quantity at index {index}: {e.error_count()} error(s), "
                    f"first: {e.errors()[0]['msg']}",
                    self.record_id
                ) from e

        return quantities


class JsonMaterialRecord(MaterialRecord):
    """Material list read from a JSON entry."""

    def __init__(self, raw: Any, fallback_id: str):
        self._raw = raw if isinstance(raw, dict) else {}
        self._record_id = str(self._raw.get('id') or fallback_id)

    @property
    def record_id(self) -> str:
        return self._record_id

    @property
    def name(self) -> str:
        return str(self._raw.get('name') or '')

    @property
    def alignment_id(self) -> str:
        value = self._raw.get('alignment_id')
        if value is None:
            raise CollectionFault("Material list has no alignment reference", self.record_id)
        return str(value)

    def read_items(self) -> List[ItemRecord]:
        raw_items = self._raw.get('items')
        if not isinstance(raw_items, list):
            raise CollectionFault("Material list has no items array", self.record_id)

        return [
            JsonItemRecord(raw_item, f"{self.record_id}/items[{index}]")
            for index, raw_item in enumerate(raw_items)
        ]


class JsonDocument(DocumentSource):
    """
    Read-only document snapshot loaded from a JSON export.

    Args:
        data: Parsed JSON document
    """

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_alignment(self, alignment_id: str) -> Optional[Alignment]:
        """Resolve an alignment by id, falling back to its name."""
        raw_alignments = self.data.get('alignments')
        if not isinstance(raw_alignments, list):
            self.logger.warning("Document has no alignments array")
            return None

        candidates = []
        for raw in raw_alignments:
            try:
                candidates.append(Alignment.model_validate(raw))
            except ValidationError as e:
                self.logger.warning(f"Skipping invalid alignment entry: {e.error_count()} error(s)")

        for alignment in candidates:
            if alignment.id == alignment_id:
                return alignment

        for alignment in candidates:
            if alignment.name and alignment.name == alignment_id:
                self.logger.debug(f"Resolved alignment '{alignment_id}' by name -> {alignment.id}")
                return alignment

        return None

    def list_material_lists(self) -> Iterator[MaterialRecord]:
        raw_lists = self.data.get('material_lists')
        if not isinstance(raw_lists, list):
            raise CollectionFault("Document has no material_lists array")

        for index, raw in enumerate(raw_lists):
            yield JsonMaterialRecord(raw, f"material_lists[{index}]")
