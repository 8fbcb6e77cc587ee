"""Input/Output handling utilities.

This module handles file I/O operations including:
- Reading document snapshot JSON files
- Exporting report rows to JSON and CSV
"""

import json
import csv
import logging
from pathlib import Path
from typing import List, Dict, Any, Optional

from ..config import Config
from ..models.schema import ReportTable, VolumeRow
from ..reporting.reporter import format_station

logger = logging.getLogger(__name__)


def row_to_record(row: VolumeRow) -> Dict[str, Any]:
    """Map a volume row onto the export column names."""
    values = [
        row.material_list_name,
        row.material_name,
        format_station(row.station_start),
        format_station(row.station_end),
        row.cut_volume,
        row.fill_volume,
        row.net_volume,
        row.cumulative_cut,
        row.cumulative_fill,
    ]
    return dict(zip(Config.EXPORT_COLUMNS, values))


class IOHandler:
    """
    Handles all file I/O operations for the report.
    """

    def __init__(self):
        """Initialize IO handler."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def read_document_json(self, file_path: Path) -> Dict[str, Any]:
        """
        Read a document snapshot JSON file.

        Args:
            file_path: Path to JSON file

        Returns:
            Parsed JSON data

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If JSON is invalid or not an object
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Document snapshot must be a JSON object: {file_path}")

        self.logger.info(f"Loaded document snapshot from {file_path}")
        return data

    def write_json(
        self,
        data: List[Dict[str, Any]],
        output_path: Path,
        indent: int = Config.JSON_INDENT
    ):
        """
        Write data to JSON file.

        Args:
            data: List of dictionaries to write
            output_path: Output file path
            indent: JSON indentation (default: 2)
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)

        self.logger.info(f"Wrote {len(data)} records to {output_path}")

    def write_csv(
        self,
        data: List[Dict[str, Any]],
        output_path: Path,
        fieldnames: Optional[List[str]] = None
    ):
        """
        Write data to CSV file.

        Args:
            data: List of dictionaries to write
            output_path: Output file path
            fieldnames: List of field names (default: export columns)
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if fieldnames is None:
            fieldnames = list(Config.EXPORT_COLUMNS)

        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(data)

        if not data:
            self.logger.warning(f"No rows to export; wrote header only to {output_path}")
        else:
            self.logger.info(f"Wrote {len(data)} records to {output_path}")

    def export_table(self, table: ReportTable, output_path: Path):
        """
        Export report rows, choosing the format from the file suffix.

        Args:
            table: Report table to export
            output_path: Output file path (.csv or .json)

        Raises:
            ValueError: If the suffix is not a supported format
        """
        records = [row_to_record(row) for row in table.rows]
        suffix = output_path.suffix.lower()

        if suffix == '.csv':
            self.write_csv(records, output_path)
        elif suffix == '.json':
            self.write_json(records, output_path)
        else:
            raise ValueError(f"Unsupported export format '{suffix}' (use .csv or .json)")
