"""Type-safe field parsing helpers for run-spec files.

Schema checks and step-argument readers share these helpers so every
run-spec problem surfaces as one error type with the offending location.
"""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, Mapping, Sequence

from core.config import parse_report_name
from core.errors import GradebookConfigError, GradebookRunSpecError


def as_mapping(value: object, location: str) -> dict[str, object]:
    """Return value as a string-keyed dict or raise for ``location``."""
    if not isinstance(value, Mapping):
        raise GradebookRunSpecError(f"{location} must be a mapping, got {type(value).__name__}.")
    non_string_keys = [key for key in value if not isinstance(key, str)]
    if non_string_keys:
        raise GradebookRunSpecError(f"{location} has non-string keys: {non_string_keys!r}.")
    return dict(value)


def as_list(value: object, location: str) -> Sequence[object]:
    """Return value as a list-like sequence or raise for ``location``."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise GradebookRunSpecError(f"{location} must be a list, got {type(value).__name__}.")
    return value


def reject_unknown_keys(
    mapping: Mapping[str, object],
    allowed_keys: AbstractSet[str],
    location: str,
) -> None:
    """Raise when mapping holds keys outside allowed_keys."""
    unknown_keys = sorted(set(mapping) - set(allowed_keys))
    if unknown_keys:
        raise GradebookRunSpecError(
            f"{location} has unknown fields {', '.join(unknown_keys)}; "
            f"allowed: {', '.join(sorted(allowed_keys))}."
        )


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise GradebookRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_bool(args: Mapping[str, object], field_name: str) -> bool | None:
    """Read an optional boolean field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise GradebookRunSpecError(f"Run-spec field '{field_name}' must be true/false.")


def optional_report_name(args: Mapping[str, object]) -> str | None:
    """Read an optional ``report_name`` that must be a plain file name."""
    value = optional_string(args, "report_name")
    if value is None:
        return None
    try:
        return parse_report_name(value, "run-spec report_name")
    except GradebookConfigError as error:
        raise GradebookRunSpecError(str(error)) from error


def optional_path(args: Mapping[str, object], field_name: str, base_dir: Path) -> str | None:
    """Read an optional path field, resolving relative paths against base_dir."""
    value = optional_string(args, field_name)
    if value is None:
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    return str(candidate)
