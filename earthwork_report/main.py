#!/usr/bin/env python3
"""
Main entry point for the earthwork cross-section volume report.

This module provides the report command and a CLI that runs it against
a JSON document snapshot. The command orchestrates the pipeline from
alignment selection to the rendered report text.
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .config import Config
from .errors import NoDataError, SelectionError
from .utils.logger import setup_logger
from .utils.io_handler import IOHandler
from .host.base import DocumentSource
from .host.json_document import JsonDocument
from .collection.collector import MaterialListCollector
from .aggregation.aggregator import VolumeAggregator
from .reporting.reporter import VolumeReportRenderer
from .models.schema import Alignment, Fault, ReportTable


class CommandResult(BaseModel):
    """
    Outcome of one report command.

    Attributes:
        status: ok, cancelled, no_data or error
        message: Text to write to the output sink (report or notice)
        alignment: The resolved alignment, if selection succeeded
        table: The aggregated table, if aggregation ran
        faults: Records left out of the table
    """

    status: Literal["ok", "cancelled", "no_data", "error"]
    message: str
    alignment: Optional[Alignment] = None
    table: Optional[ReportTable] = None
    faults: List[Fault] = Field(default_factory=list)


class EarthworkReportCommand:
    """
    Report command coordinator.

    This class runs the report for one alignment:
    1. Alignment selection
    2. Material list collection
    3. Volume aggregation
    4. Report rendering

    The document is passed into every call; the command keeps no state
    between runs.
    """

    def __init__(self):
        """Initialize the command with all pipeline components."""
        self.logger = logging.getLogger(self.__class__.__name__)

        self.collector = MaterialListCollector()
        self.aggregator = VolumeAggregator()
        self.renderer = VolumeReportRenderer()

    def select_alignment(self, source: DocumentSource, alignment_id: Optional[str]) -> Alignment:
        """
        Resolve the alignment to report on.

        Raises:
            SelectionError: If nothing is selected or the selection is not an alignment
        """
        if not alignment_id:
            raise SelectionError(Config.MSG_CANCELLED)

        alignment = source.get_alignment(alignment_id)
        if alignment is None:
            self.logger.error(f"'{alignment_id}' does not resolve to an alignment")
            raise SelectionError(Config.MSG_BAD_ALIGNMENT)

        return alignment

    def build_table(self, source: DocumentSource, alignment: Alignment) -> ReportTable:
        """
        Collect and aggregate the volume table for an alignment.

        Raises:
            NoDataError: If the alignment has no material lists
        """
        collection = self.collector.collect(alignment.id, source)
        if not collection.material_lists:
            raise NoDataError(Config.MSG_NO_MATERIAL_LISTS, collection.faults)

        table = self.aggregator.aggregate(collection.material_lists)
        return ReportTable(rows=table.rows, faults=tuple(collection.faults) + table.faults)

    def run(self, source: DocumentSource, alignment_id: Optional[str]) -> CommandResult:
        """
        Run the report for one alignment.

        Args:
            source: Document snapshot to read
            alignment_id: Selected alignment id or name

        Returns:
            CommandResult whose message is the report or a notice
        """
        self.logger.info(f"Running volume report for alignment: {alignment_id}")

        try:
            alignment = self.select_alignment(source, alignment_id)
        except SelectionError as e:
            self.logger.warning(f"Selection failed: {e}")
            return CommandResult(status="cancelled", message=str(e))
        except Exception as e:
            self.logger.error(f"Alignment lookup failed: {e}", exc_info=True)
            return CommandResult(status="error", message=f"Error: {e}")

        try:
            table = self.build_table(source, alignment)
        except NoDataError as e:
            self._log_faults(e.faults)
            self.logger.info(f"No data: {e}")
            return CommandResult(status="no_data", message=str(e), alignment=alignment, faults=e.faults)
        except Exception as e:
            self.logger.error(f"Volume report failed: {e}", exc_info=True)
            return CommandResult(status="error", message=f"Error: {e}", alignment=alignment)

        self._log_faults(table.faults)
        message = self.renderer.render(table)
        status = "no_data" if table.is_empty else "ok"

        self.logger.info(
            f"{status.upper()}: {alignment.id} - rows: {len(table.rows)}, "
            f"faults: {len(table.faults)}"
        )

        return CommandResult(
            status=status,
            message=message,
            alignment=alignment,
            table=table,
            faults=list(table.faults)
        )

    def run_batch(self, source: DocumentSource, alignment_ids: List[Optional[str]]) -> List[CommandResult]:
        """Run the report for several alignments, one after another."""
        self.logger.info(f"Starting batch of {len(alignment_ids)} alignment(s)")

        results = [self.run(source, alignment_id) for alignment_id in alignment_ids]

        ok_count = sum(1 for r in results if r.status == "ok")
        self.logger.info(f"Batch complete: {ok_count} report(s), {len(results) - ok_count} not reported")

        return results

    def _log_faults(self, faults):
        for fault in faults:
            self.logger.warning(f"Left out of report: {fault.describe()}")


def export_path_for(base: Path, alignment_id: str, multiple: bool) -> Path:
    """Export path for one alignment; suffixed with its id when there are several."""
    if not multiple:
        return base
    safe_id = "".join(c if c.isalnum() or c in "-_" else "_" for c in alignment_id)
    return base.with_name(f"{base.stem}_{safe_id}{base.suffix}")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Report cut/fill volumes per cross-section for an alignment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report on one alignment
  earthwork-report -i data/site.json -a AL-1

  # Several alignments, exporting rows to CSV
  earthwork-report -i data/site.json -a AL-1 AL-2 -e output/volumes.csv

  # Enable debug logging
  earthwork-report -i data/site.json -a "Main Road" --log-level DEBUG
        """
    )

    parser.add_argument(
        '-i', '--input',
        type=str,
        required=True,
        help='Document snapshot JSON file'
    )

    parser.add_argument(
        '-a', '--alignment',
        type=str,
        nargs='+',
        help='Alignment id(s) or name(s) to report on'
    )

    parser.add_argument(
        '-e', '--export',
        type=str,
        help='Also export report rows to this .csv or .json file'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=Config.LOG_LEVEL,
        help=f'Logging level (default: {Config.LOG_LEVEL})'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write logs to this file'
    )

    args = parser.parse_args(argv)

    logger = setup_logger(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        log_file=Path(args.log_file) if args.log_file else None
    )
    logger.info(f"{Config.APP_NAME} v{Config.VERSION}")

    io_handler = IOHandler()
    try:
        source = JsonDocument(io_handler.read_document_json(Path(args.input)))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot load document: {e}")
        sys.exit(1)

    command = EarthworkReportCommand()
    alignment_ids = args.alignment or [None]
    results = command.run_batch(source, alignment_ids)

    failed = False
    for alignment_id, result in zip(alignment_ids, results):
        print(result.message, end="" if result.message.endswith("\n") else "\n")

        if result.status in ("cancelled", "error"):
            failed = True
            continue

        if args.export and result.table is not None:
            output_path = export_path_for(Path(args.export), result.alignment.id, len(results) > 1)
            try:
                io_handler.export_table(result.table, output_path)
            except (OSError, ValueError) as e:
                logger.error(f"Export failed for {alignment_id}: {e}")
                failed = True

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
