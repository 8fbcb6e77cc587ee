"""Fixed-width text rendering of a volume report table."""

import logging
from typing import List

from ..config import Config
from ..models.schema import ReportTable, VolumeRow

logger = logging.getLogger(__name__)


class VolumeReportRenderer:
    """
    Renders a ReportTable as a fixed-width text report.

    Columns are left-justified and separated by a single space. Names
    longer than their column are cut to the column width; numbers use
    fixed-point notation with no grouping, so the layout does not depend
    on locale or magnitude notation.
    """

    def __init__(self, rule_width: int = Config.RULE_WIDTH):
        """
        Initialize the renderer.

        Args:
            rule_width: Length of the horizontal rule lines
        """
        self.rule_width = rule_width
        self.columns = list(Config.COLUMNS)
        self.logger = logging.getLogger(self.__class__.__name__)

    def render(self, table: ReportTable) -> str:
        """
        Render the table.

        Args:
            table: Aggregated rows and totals

        Returns:
            The report text, or the no-data notice for an empty table
        """
        if table.is_empty:
            self.logger.info("No rows to render")
            return Config.MSG_NO_VOLUME_DATA

        lines = [
            self._rule('='),
            Config.REPORT_TITLE,
            self._rule('='),
            self._format_line([name for name, _ in self.columns]),
            self._rule('-'),
        ]
        lines.extend(self.format_row(row) for row in table.rows)
        lines.append(self._rule('-'))
        lines.append(self.format_summary(table))
        lines.append(self._rule('='))

        self.logger.debug(f"Rendered {len(table.rows)} row(s)")

        return "\n".join(lines) + "\n"

    def format_row(self, row: VolumeRow) -> str:
        """Format one data row."""
        list_width = self.columns[0][1]
        material_width = self.columns[1][1]

        return self._format_line([
            row.material_list_name[:list_width],
            row.material_name[:material_width],
            format_station(row.station_start),
            format_station(row.station_end),
            format_volume(row.cut_volume),
            format_volume(row.fill_volume),
            format_volume(row.net_volume),
            format_volume(row.cumulative_cut),
            format_volume(row.cumulative_fill),
        ])

    def format_summary(self, table: ReportTable) -> str:
        """Format the grand-total line."""
        unit = Config.VOLUME_UNIT
        return (
            f"SUMMARY: Total Cut Volume: {format_volume(table.total_cut)} {unit}, "
            f"Total Fill Volume: {format_volume(table.total_fill)} {unit}, "
            f"Net Volume: {format_volume(table.net_total)} {unit}"
        )

    def _format_line(self, values: List[str]) -> str:
        return " ".join(
            f"{value:<{width}}" for value, (_, width) in zip(values, self.columns)
        )

    def _rule(self, char: str) -> str:
        return char * self.rule_width


def format_station(value: float) -> str:
    """Station as a fixed-point string with three decimals."""
    return f"{value:.{Config.STATION_DECIMALS}f}"


def format_volume(value: float) -> str:
    """Volume as a fixed-point string with two decimals."""
    return f"{value:.{Config.VOLUME_DECIMALS}f}"
