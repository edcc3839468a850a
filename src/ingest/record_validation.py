"""Typed record validation for split lines.

This module turns a field set into a student record. Header rows and
blank lines are skipped, and every rejection raises a distinct error
type carrying the offending line number.
"""

from __future__ import annotations

import re
from typing import Sequence

from core.constants import (
    HEADER_ID_LABEL,
    HEADER_SCORE_LABEL,
    INT32_MAX,
    INT32_MIN,
    MIN_RECORD_FIELDS,
    QUOTE_CHAR,
)
from core.errors import (
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
    UnterminatedQuoteError,
)
from core.types import RawLine, StudentRecord
from ingest.delimiter_detection import detect_delimiter
from ingest.field_splitter import split_line

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_raw_line(raw_line: RawLine, strict_quotes: bool = False) -> StudentRecord | None:
    """Detect, split, and validate one source line.

    Args:
        raw_line: Source line with its one-based number.
        strict_quotes: Reject lines that end inside a quoted segment.

    Returns:
        Parsed record, or None for blank and header lines.

    Raises:
        MissingFieldError: If fields are missing or the name is empty.
        UnterminatedQuoteError: If strict_quotes is set and a quote is open.
        InvalidIdFormatError: If the id is not an integer.
        InvalidScoreFormatError: If the score is not an integer.
    """
    if not raw_line.text.strip():
        return None
    delimiter = detect_delimiter(raw_line.text)
    split = split_line(raw_line.text, delimiter)
    if strict_quotes and split.unterminated_quote:
        raise UnterminatedQuoteError(raw_line.line_number, "quoted field is not terminated")
    return validate_fields(split.fields, raw_line.line_number)


def validate_fields(fields: Sequence[str], line_number: int) -> StudentRecord | None:
    """Interpret split fields as a student record.

    Args:
        fields: Trimmed fields from one line.
        line_number: One-based line number for error context.

    Returns:
        Parsed record, or None when the fields form a header row.

    Raises:
        MissingFieldError: If fewer than three fields or the name is empty.
        InvalidIdFormatError: If the first field is not an integer.
        InvalidScoreFormatError: If the last field is not an integer.
    """
    if len(fields) < MIN_RECORD_FIELDS:
        raise MissingFieldError(line_number, f"expected {MIN_RECORD_FIELDS} fields")
    first = strip_quotes(fields[0])
    last = strip_quotes(fields[-1])
    if is_header_row(first, last):
        return None
    student_id = parse_integer(first)
    if student_id is None:
        raise InvalidIdFormatError(line_number, "Id is not an integer")
    score = parse_integer(last)
    if score is None:
        raise InvalidScoreFormatError(line_number, "score is not an integer")
    full_name = join_name_fields(fields)
    if not full_name:
        raise MissingFieldError(line_number, "FullName is missing")
    return StudentRecord(student_id=student_id, full_name=full_name, score=score)


def strip_quotes(field: str) -> str:
    """Trim a field and remove one layer of surrounding double quotes."""
    value = field.strip()
    if len(value) >= 2 and value[0] == QUOTE_CHAR and value[-1] == QUOTE_CHAR:
        return value[1:-1]
    return value


def is_header_row(first: str, last: str) -> bool:
    """Return whether the outer fields read ``id`` and ``score``."""
    return first.lower() == HEADER_ID_LABEL and last.lower() == HEADER_SCORE_LABEL


def parse_integer(text: str) -> int | None:
    """Parse a signed 32-bit integer.

    Args:
        text: Candidate text with optional sign and ASCII digits.

    Returns:
        Parsed value, or None when the text is not a valid integer.
    """
    value = text.strip()
    if _INTEGER_PATTERN.fullmatch(value) is None:
        return None
    number = int(value)
    if number < INT32_MIN or number > INT32_MAX:
        return None
    return number


def join_name_fields(fields: Sequence[str]) -> str:
    """Build the full name from the fields between id and score."""
    if len(fields) == MIN_RECORD_FIELDS:
        return strip_quotes(fields[1]).strip()
    parts = [strip_quotes(field) for field in fields[1:-1]]
    return " ".join(parts).strip()
