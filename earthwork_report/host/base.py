"""Capability interface onto a host design document.

The report pipeline never touches a live document directly. It only
sees these read-only records, so collection and aggregation can run
against any host (or against fixture data in tests).
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from ..models.schema import Alignment, QuantityRecord


class ItemRecord(ABC):
    """One material type within a material list."""

    @property
    @abstractmethod
    def record_id(self) -> str:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def read_quantities(self) -> List[QuantityRecord]:
        """
        Read the item's quantity records in record order.

        Raises:
            ExtractionFault: If the quantities cannot be read
        """


class MaterialRecord(ABC):
    """A named material list bound to one alignment."""

    @property
    @abstractmethod
    def record_id(self) -> str:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def alignment_id(self) -> str:
        """
        Identifier of the associated alignment.

        Raises:
            CollectionFault: If the reference cannot be read
        """

    @abstractmethod
    def read_items(self) -> List[ItemRecord]:
        """
        Read the list's items in record order.

        Raises:
            CollectionFault: If the items cannot be read
        """


class DocumentSource(ABC):
    """Read-only snapshot of a design document for one report run."""

    @abstractmethod
    def get_alignment(self, alignment_id: str) -> Optional[Alignment]:
        """Resolve an alignment, or None if the identifier is not one."""

    @abstractmethod
    def list_material_lists(self) -> Iterator[MaterialRecord]:
        """
        Enumerate every material list in document order.

        Raises:
            CollectionFault: If the collection cannot be enumerated
        """
