"""Public SDK surface for Gradebook.

This module provides a stable import path for library users.
It re-exports the primary client, typed models, and core operations.
"""

from __future__ import annotations

from core.config import GradebookConfig
from core.errors import (
    GradebookError,
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
    SourceNotFoundError,
    UnexpectedFailureError,
    WriteFailureError,
)
from core.types import GradingOptions, GradingResult, StudentRecord
from grading.grade_bands import GRADE_BANDS, classify_grade
from ingest.delimiter_detection import detect_delimiter
from ingest.field_splitter import split_fields
from ingest.pipeline import ingest_student_records
from report.gradebook_sdk import GradebookClient
from report.report_writer import format_report_line, write_report

__all__ = [
    "GRADE_BANDS",
    "GradebookClient",
    "GradebookConfig",
    "GradebookError",
    "GradingOptions",
    "GradingResult",
    "InvalidIdFormatError",
    "InvalidScoreFormatError",
    "MissingFieldError",
    "SourceNotFoundError",
    "StudentRecord",
    "UnexpectedFailureError",
    "WriteFailureError",
    "classify_grade",
    "detect_delimiter",
    "format_report_line",
    "ingest_student_records",
    "split_fields",
    "write_report",
]
