"""Shared typed models.

This module defines immutable data models used by the ingest,
grading, and report layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StudentRecord:
    """Validated student record.

    Attributes:
        student_id: Signed integer student identifier.
        full_name: Non-empty display name.
        score: Signed integer score, not range-checked.
    """

    student_id: int
    full_name: str
    score: int


@dataclass(frozen=True)
class RawLine:
    """One source line before parsing.

    Attributes:
        line_number: One-based position in the source.
        text: Line content without its trailing newline.
    """

    line_number: int
    text: str


@dataclass(frozen=True)
class SplitLine:
    """Fields produced by splitting one line.

    Attributes:
        fields: Trimmed fields in line order.
        unterminated_quote: Whether the line ended inside a quoted segment.
    """

    fields: tuple[str, ...]
    unterminated_quote: bool = False


@dataclass(frozen=True)
class GradeBand:
    """Closed score interval mapped to a letter grade.

    Attributes:
        letter: Letter grade for the band.
        lower: Inclusive lower bound.
        upper: Inclusive upper bound.
    """

    letter: str
    lower: int
    upper: int

    def contains(self, score: int) -> bool:
        """Return whether a score falls inside this band."""
        return self.lower <= score <= self.upper


@dataclass(frozen=True)
class GradingOptions:
    """Grade command options.

    Attributes:
        source_path: Input file path.
        output_path: Optional explicit report path.
        report_name: Optional report file name used when deriving output path.
        strict_quotes: Optional override for the unterminated-quote policy.
    """

    source_path: str
    output_path: str | None = None
    report_name: str | None = None
    strict_quotes: bool | None = None


@dataclass(frozen=True)
class GradingResult:
    """Grade command outputs.

    Attributes:
        source_path: Resolved input path.
        report_path: Written report path.
        records: Records included in the report.
    """

    source_path: Path
    report_path: Path
    records: tuple[StudentRecord, ...]

    @property
    def record_count(self) -> int:
        """Return the number of reported records."""
        return len(self.records)
