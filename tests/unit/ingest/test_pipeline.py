"""Unit tests for the student ingest pipeline."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from core.config import GradebookConfig
from core.errors import (
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
    SourceNotFoundError,
    SourceReadError,
    UnterminatedQuoteError,
)
from core.types import StudentRecord
from ingest.pipeline import ingest_student_records
from tests.fixture_paths import fixture_path


def _config() -> GradebookConfig:
    return GradebookConfig(
        input_path="students.txt",
        report_name="report.txt",
        strict_quotes=False,
        log_level="WARNING",
    )


def test_ingest_student_records_skips_header_and_keeps_order() -> None:
    """Valid rows should load in file order without the header."""
    records = ingest_student_records(fixture_path("students/class_roster.txt"), _config())

    assert records == [
        StudentRecord(student_id=1, full_name="Ama Mensah", score=85),
        StudentRecord(student_id=2, full_name="Kojo Asare", score=45),
    ]


def test_ingest_student_records_accepts_mixed_delimiters() -> None:
    """Each line should use its own detected delimiter."""
    records = ingest_student_records(fixture_path("students/mixed_delimiters.txt"), _config())

    assert [record.full_name for record in records] == ["Ama Mensah", "Kojo Asare", "Doe, Jane"]


def test_ingest_student_records_stops_at_bad_score() -> None:
    """A bad score should abort with its line number."""
    with pytest.raises(InvalidScoreFormatError) as error_info:
        ingest_student_records(fixture_path("students/bad_score.txt"), _config())

    assert error_info.value.line_number == 3


def test_ingest_student_records_stops_at_missing_field() -> None:
    """A short line should abort before later valid lines are read."""
    with pytest.raises(MissingFieldError) as error_info:
        ingest_student_records(fixture_path("students/missing_field.txt"), _config())

    assert error_info.value.line_number == 2


def test_ingest_student_records_reports_invalid_id(tmp_path: Path) -> None:
    """A non-integer id should raise the id-specific error."""
    source_path = tmp_path / "students.txt"
    source_path.write_text("1,Ama,80\nA2,Kojo,70\n", encoding="utf-8")

    with pytest.raises(InvalidIdFormatError) as error_info:
        ingest_student_records(source_path, _config())

    assert error_info.value.line_number == 2


def test_ingest_student_records_skips_repeated_header_rows(tmp_path: Path) -> None:
    """Header rows should be skipped at any position."""
    source_path = tmp_path / "students.txt"
    source_path.write_text("1,Ama,80\nid;name;score\n\n2,Kojo,70\n", encoding="utf-8")

    records = ingest_student_records(source_path, _config())

    assert [record.student_id for record in records] == [1, 2]


def test_ingest_student_records_returns_empty_list_for_header_only(tmp_path: Path) -> None:
    """A file with only a header should yield no records."""
    source_path = tmp_path / "students.txt"
    source_path.write_text("id,FullName,score\n", encoding="utf-8")

    assert ingest_student_records(source_path, _config()) == []


def test_ingest_student_records_raises_for_missing_source(tmp_path: Path) -> None:
    """A missing source should raise a source-not-found error."""
    with pytest.raises(SourceNotFoundError):
        ingest_student_records(tmp_path / "missing.txt", _config())


def test_ingest_student_records_honors_strict_quotes(tmp_path: Path) -> None:
    """Strict config should reject the line that permissive mode accepts."""
    source_path = tmp_path / "students.txt"
    source_path.write_text('1,Jane,"85\n', encoding="utf-8")

    permissive_records = ingest_student_records(source_path, _config())
    with pytest.raises(UnterminatedQuoteError):
        ingest_student_records(source_path, replace(_config(), strict_quotes=True))

    assert permissive_records == [StudentRecord(student_id=1, full_name="Jane", score=85)]


def test_ingest_student_records_reports_bad_score_before_later_decode_error(
    tmp_path: Path,
) -> None:
    """A record error should win over an undecodable byte on a later line."""
    source_path = tmp_path / "students.txt"
    source_path.write_bytes(b"1,Ama,80\n2,Kojo,abc\n3,Jos\xe9,80\n")

    with pytest.raises(InvalidScoreFormatError) as error_info:
        ingest_student_records(source_path, _config())

    assert error_info.value.line_number == 2


def test_ingest_student_records_reports_decode_error_line(tmp_path: Path) -> None:
    """An undecodable line after valid rows should name that line."""
    source_path = tmp_path / "students.txt"
    source_path.write_bytes(b"1,Ama,80\n2,Kojo,70\n3,Jos\xe9,80\n")

    with pytest.raises(SourceReadError) as error_info:
        ingest_student_records(source_path, _config())

    assert "on line 3:" in str(error_info.value)
