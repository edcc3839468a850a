"""Gradebook exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type and every type carries a
stable ``kind`` string so callers can tell failures apart.
"""

from __future__ import annotations

from typing import ClassVar


class GradebookError(Exception):
    """Base exception for all Gradebook failures."""

    kind: ClassVar[str] = "gradebook"


class GradebookConfigError(GradebookError):
    """Raised for invalid runtime configuration."""

    kind: ClassVar[str] = "config"


class GradebookRunSpecError(GradebookError):
    """Raised for invalid or unsupported run-spec configuration."""

    kind: ClassVar[str] = "run_spec"


class GradebookIngestError(GradebookError):
    """Raised for source reading and record parsing failures."""

    kind: ClassVar[str] = "ingest"


class SourceReadError(GradebookIngestError):
    """Raised when the input source cannot be decoded or read."""

    kind: ClassVar[str] = "source_read"


class SourceNotFoundError(SourceReadError):
    """Raised when the input source cannot be opened for reading."""

    kind: ClassVar[str] = "source_not_found"


class GradebookRecordError(GradebookIngestError):
    """Base for failures tied to one input line.

    Attributes:
        line_number: One-based line number of the rejected record.
        reason: Human-readable rejection reason without line context.
    """

    kind: ClassVar[str] = "invalid_record"

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}")


class MissingFieldError(GradebookRecordError):
    """Raised when a record has too few fields or an empty full name."""

    kind: ClassVar[str] = "missing_field"


class UnterminatedQuoteError(MissingFieldError):
    """Raised in strict quote mode when a line ends inside quotes."""

    kind: ClassVar[str] = "unterminated_quote"


class InvalidIdFormatError(GradebookRecordError):
    """Raised when the id field is not an integer."""

    kind: ClassVar[str] = "invalid_id_format"


class InvalidScoreFormatError(GradebookRecordError):
    """Raised when the score field is not an integer."""

    kind: ClassVar[str] = "invalid_score_format"


class WriteFailureError(GradebookError):
    """Raised when the report destination cannot be created or written."""

    kind: ClassVar[str] = "write_failure"


class UnexpectedFailureError(GradebookError):
    """Raised for failures no other error type classifies."""

    kind: ClassVar[str] = "unexpected"
