"""Report writer for graded student records.

This module renders one report line per record and writes the lines
to a UTF-8 text file, replacing any existing content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from core.constants import REPORT_ENCODING, REPORT_LINE_TEMPLATE
from core.errors import WriteFailureError
from core.logging_config import get_logger
from core.types import StudentRecord
from grading.grade_bands import classify_grade

_LOGGER = get_logger(__name__)


def format_report_line(record: StudentRecord) -> str:
    """Render one record as a report line.

    Args:
        record: Validated student record.

    Returns:
        ``<name> (ID: <id>): Score = <score>, Grade = <letter>``.
    """
    return REPORT_LINE_TEMPLATE.format(
        full_name=record.full_name,
        student_id=record.student_id,
        score=record.score,
        grade=classify_grade(record.score),
    )


def render_report_lines(records: Iterable[StudentRecord]) -> list[str]:
    """Render report lines in record order."""
    return [format_report_line(record) for record in records]


def write_report(records: Iterable[StudentRecord], output_path: str | Path) -> Path:
    """Write a report file for the given records.

    Args:
        records: Records in report order.
        output_path: Destination file path. Parent directories must exist.

    Returns:
        Resolved path of the written report.

    Raises:
        WriteFailureError: If the destination cannot be created or written.
    """
    report_path = Path(output_path).expanduser().resolve()
    lines = render_report_lines(records)
    try:
        with report_path.open("w", encoding=REPORT_ENCODING, newline="\n") as handle:
            for line in lines:
                handle.write(line + "\n")
    except OSError as error:
        reason = error.strerror or type(error).__name__
        raise WriteFailureError(
            f"Failed to write report at {report_path}: {reason}. "
            "Check the destination directory and permissions."
        ) from error
    _LOGGER.info("report_written", report_path=str(report_path), line_count=len(lines))
    return report_path


def derive_report_path(source_path: str | Path, report_name: str) -> Path:
    """Place the report next to the resolved input file."""
    resolved_source = Path(source_path).expanduser().resolve()
    return resolved_source.parent / report_name
