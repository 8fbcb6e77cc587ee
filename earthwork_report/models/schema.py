"""Pydantic models for earthwork volume data.

This module defines the records read from a design document and the
derived rows and table produced by the aggregation stage, ensuring
type safety throughout the report pipeline.
"""

from typing import Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Alignment(BaseModel):
    """
    A roadway centerline that keys cross-section data.

    Attributes:
        id: Stable identifier of the alignment in the document
        name: Display name
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Alignment identifier")
    name: str = Field("", description="Alignment display name")


class QuantityRecord(BaseModel):
    """
    Cut/fill volumes for one station range of a material.

    Station ordering (start <= end) is owned by the authoring tool and
    is passed through as given.

    Attributes:
        station_start: Station at the start of the segment
        station_end: Station at the end of the segment
        cut_volume: Excavated volume (m³)
        fill_volume: Deposited volume (m³)
    """

    model_config = ConfigDict(frozen=True)

    station_start: float = Field(..., allow_inf_nan=False, description="Start station")
    station_end: float = Field(..., allow_inf_nan=False, description="End station")
    cut_volume: float = Field(..., ge=0.0, allow_inf_nan=False, description="Cut volume (m³)")
    fill_volume: float = Field(..., ge=0.0, allow_inf_nan=False, description="Fill volume (m³)")


class VolumeRow(BaseModel):
    """
    One report row, derived from exactly one QuantityRecord.

    Attributes:
        material_list_name: Name of the owning material list
        material_name: Name of the material list item
        station_start: Segment start station
        station_end: Segment end station
        cut_volume: Cut volume of the segment
        fill_volume: Fill volume of the segment
        net_volume: cut_volume - fill_volume (negative for net fill)
        cumulative_cut: Running cut total including this row
        cumulative_fill: Running fill total including this row
    """

    model_config = ConfigDict(frozen=True)

    material_list_name: str
    material_name: str
    station_start: float
    station_end: float
    cut_volume: float
    fill_volume: float
    net_volume: float
    cumulative_cut: float
    cumulative_fill: float


class Fault(BaseModel):
    """A record that could not be read and was left out of the table."""

    model_config = ConfigDict(frozen=True)

    stage: Literal["collection", "extraction"]
    record_id: Optional[str] = None
    reason: str

    def describe(self) -> str:
        target = self.record_id or "<document>"
        return f"{self.stage} fault on {target}: {self.reason}"


class ReportTable(BaseModel):
    """
    Ordered volume rows plus the faults met while building them.

    Totals are the final cumulative values, or 0 for an empty table.
    """

    model_config = ConfigDict(frozen=True)

    rows: Tuple[VolumeRow, ...] = Field(default_factory=tuple)
    faults: Tuple[Fault, ...] = Field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return len(self.rows) == 0

    @property
    def total_cut(self) -> float:
        return self.rows[-1].cumulative_cut if self.rows else 0.0

    @property
    def total_fill(self) -> float:
        return self.rows[-1].cumulative_fill if self.rows else 0.0

    @property
    def net_total(self) -> float:
        return self.total_cut - self.total_fill
