"""Volume aggregation.

This module walks material lists, their items and their quantity
records in order and turns every quantity into a report row carrying
running cut/fill totals.
"""

import logging
from typing import Iterable, List

from ..host.base import MaterialRecord
from ..models.schema import Fault, ReportTable, VolumeRow

logger = logging.getLogger(__name__)


class VolumeAggregator:
    """
    Builds a ReportTable from material lists.

    Traversal order is list order, then item order, then quantity
    order. Cumulative totals start at zero once per aggregation and run
    across all lists; each row's cumulative values include its own
    volumes.

    Unreadable lists or items contribute no rows. They are recorded as
    faults on the table and aggregation carries on with their siblings.
    """

    def __init__(self):
        """Initialize the aggregator."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def aggregate(self, material_lists: Iterable[MaterialRecord]) -> ReportTable:
        """
        Aggregate quantity records into volume rows.

        Args:
            material_lists: Material lists in the order they should be reported

        Returns:
            ReportTable with one row per quantity read successfully
        """
        self.logger.debug("Starting volume aggregation")

        rows: List[VolumeRow] = []
        faults: List[Fault] = []
        cumulative_cut = 0.0
        cumulative_fill = 0.0

        for material_list in material_lists:
            try:
                list_name = material_list.name
                items = list(material_list.read_items())
            except Exception as e:
                self.logger.warning(f"Skipping material list {material_list.record_id}: {e}")
                faults.append(Fault(stage="collection", record_id=material_list.record_id, reason=str(e)))
                continue

            for item in items:
                # Read the whole item first so a failure emits no partial rows
                try:
                    item_name = item.name
                    quantities = list(item.read_quantities())
                except Exception as e:
                    self.logger.warning(f"Skipping item {item.record_id}: {e}")
                    faults.append(Fault(stage="extraction", record_id=item.record_id, reason=str(e)))
                    continue

                for quantity in quantities:
                    cumulative_cut += quantity.cut_volume
                    cumulative_fill += quantity.fill_volume

                    rows.append(VolumeRow(
                        material_list_name=list_name,
                        material_name=item_name,
                        station_start=quantity.station_start,
                        station_end=quantity.station_end,
                        cut_volume=quantity.cut_volume,
                        fill_volume=quantity.fill_volume,
                        net_volume=quantity.cut_volume - quantity.fill_volume,
                        cumulative_cut=cumulative_cut,
                        cumulative_fill=cumulative_fill,
                    ))

                self.logger.debug(
                    f"Item {item.record_id} ({item_name}): {len(quantities)} quantity record(s)"
                )

        self.logger.info(
            f"Aggregated {len(rows)} row(s): cut={cumulative_cut:.2f}, "
            f"fill={cumulative_fill:.2f}, faults={len(faults)}"
        )

        return ReportTable(rows=tuple(rows), faults=tuple(faults))
