"""Unit tests for run-spec field helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import GradebookRunSpecError
from core.run_spec_fields import (
    as_list,
    as_mapping,
    optional_bool,
    optional_path,
    optional_report_name,
    reject_unknown_keys,
)


def test_as_mapping_rejects_non_mapping() -> None:
    """Scalars should not pass as mappings."""
    with pytest.raises(GradebookRunSpecError, match="Run spec root must be a mapping"):
        as_mapping("steps", "Run spec root")


def test_as_mapping_rejects_non_string_keys() -> None:
    """Integer keys should be reported."""
    with pytest.raises(GradebookRunSpecError, match="non-string keys"):
        as_mapping({1: "a"}, "Run spec 'defaults'")


def test_as_list_rejects_strings() -> None:
    """A bare string should not be treated as a step list."""
    with pytest.raises(GradebookRunSpecError, match="must be a list"):
        as_list("grade", "Run spec 'steps'")


def test_reject_unknown_keys_names_offending_fields() -> None:
    """Unknown fields should be listed alongside the allowed ones."""
    with pytest.raises(GradebookRunSpecError) as error_info:
        reject_unknown_keys({"input": "a", "dataset": "b"}, frozenset({"input"}), "Step 1")

    assert str(error_info.value) == "Step 1 has unknown fields dataset; allowed: input."


def test_optional_bool_rejects_strings() -> None:
    """Quoted booleans should be rejected."""
    with pytest.raises(GradebookRunSpecError):
        optional_bool({"strict_quotes": "yes"}, "strict_quotes")


def test_optional_report_name_accepts_plain_names() -> None:
    """Plain names should be trimmed and returned."""
    assert optional_report_name({"report_name": " out.txt "}) == "out.txt"


def test_optional_report_name_rejects_windows_separators() -> None:
    """Backslash paths should be rejected as run-spec errors."""
    with pytest.raises(GradebookRunSpecError):
        optional_report_name({"report_name": "..\\escaped.txt"})


def test_optional_path_resolves_relative_to_base_dir(tmp_path: Path) -> None:
    """Relative paths should resolve against the spec directory."""
    assert optional_path({"input": "a.txt"}, "input", tmp_path) == str(tmp_path / "a.txt")
