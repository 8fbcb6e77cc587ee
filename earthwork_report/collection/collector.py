"""Material list collection.

This module selects the material lists that belong to one alignment
from everything a document source exposes.
"""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..host.base import DocumentSource, MaterialRecord
from ..models.schema import Fault

logger = logging.getLogger(__name__)


class CollectionResult(BaseModel):
    """Material lists bound to an alignment, plus lists that could not be read."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    material_lists: List[MaterialRecord] = Field(default_factory=list)
    faults: List[Fault] = Field(default_factory=list)


class MaterialListCollector:
    """
    Filters a document's material lists down to one alignment.

    Document enumeration order is preserved. A list that cannot be read
    is skipped; a failure of the enumeration itself keeps whatever was
    gathered before it. Both are recorded as collection faults and
    never abort the command.
    """

    def __init__(self):
        """Initialize the collector."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def collect(self, alignment_id: str, source: DocumentSource) -> CollectionResult:
        """
        Collect the material lists associated with an alignment.

        Args:
            alignment_id: Identifier of the selected alignment
            source: Document to read material lists from

        Returns:
            CollectionResult with matching lists in document order
        """
        self.logger.debug(f"Collecting material lists for alignment {alignment_id}")

        material_lists: List[MaterialRecord] = []
        faults: List[Fault] = []
        seen = 0

        try:
            for record in source.list_material_lists():
                seen += 1
                try:
                    owner_id = record.alignment_id
                except Exception as e:
                    self.logger.warning(f"Skipping material list {record.record_id}: {e}")
                    faults.append(Fault(stage="collection", record_id=record.record_id, reason=str(e)))
                    continue

                if owner_id == alignment_id:
                    material_lists.append(record)

        except Exception as e:
            self.logger.warning(f"Material list enumeration failed after {seen} record(s): {e}")
            faults.append(Fault(
                stage="collection",
                record_id=getattr(e, 'record_id', None),
                reason=str(e)
            ))

        self.logger.info(
            f"Collected {len(material_lists)} of {seen} material list(s) "
            f"for alignment {alignment_id}"
        )

        return CollectionResult(material_lists=material_lists, faults=faults)
