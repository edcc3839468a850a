"""Ingest orchestration for student record sources.

This module coordinates line reading, delimiter detection, field
splitting, and validation. The first invalid line aborts the run.
"""

from __future__ import annotations

from pathlib import Path

from core.config import GradebookConfig
from core.errors import GradebookRecordError
from core.logging_config import get_logger
from core.types import StudentRecord
from ingest.input_reader import open_source_lines
from ingest.record_validation import parse_raw_line

_LOGGER = get_logger(__name__)


class StudentIngestRunner:
    """Runner that reads one source into records."""

    def __init__(self, source_path: Path, strict_quotes: bool = False) -> None:
        self._source_path = source_path
        self._strict_quotes = strict_quotes

    def run(self) -> list[StudentRecord]:
        """Read the source and return records in file order.

        Raises:
            SourceNotFoundError: If the source cannot be opened.
            SourceReadError: If the source cannot be decoded.
            GradebookRecordError: On the first invalid line.
        """
        records: list[StudentRecord] = []
        skipped_count = 0
        with open_source_lines(self._source_path) as raw_lines:
            for raw_line in raw_lines:
                try:
                    record = parse_raw_line(raw_line, self._strict_quotes)
                except GradebookRecordError as error:
                    _log_record_rejected(self._source_path, error)
                    raise
                if record is None:
                    skipped_count += 1
                    continue
                records.append(record)
        _log_records_loaded(self._source_path, len(records), skipped_count)
        return records


def ingest_student_records(source_path: str | Path, config: GradebookConfig) -> list[StudentRecord]:
    """Run the ingest pipeline for one source file.

    Args:
        source_path: Input file path.
        config: Runtime configuration.

    Returns:
        Valid records in file order, with blank and header lines removed.

    Raises:
        SourceNotFoundError: If the source cannot be opened.
        SourceReadError: If the source cannot be decoded.
        GradebookRecordError: If any line is invalid.
    """
    resolved_path = Path(source_path).expanduser().resolve()
    runner = StudentIngestRunner(resolved_path, strict_quotes=config.strict_quotes)
    return runner.run()


def _log_record_rejected(source_path: Path, error: GradebookRecordError) -> None:
    _LOGGER.warning(
        "record_rejected",
        source_path=str(source_path),
        line_number=error.line_number,
        kind=error.kind,
        reason=error.reason,
    )


def _log_records_loaded(source_path: Path, record_count: int, skipped_count: int) -> None:
    _LOGGER.info(
        "records_loaded",
        source_path=str(source_path),
        record_count=record_count,
        skipped_count=skipped_count,
    )
