"""Runtime configuration model for Gradebook.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from core.constants import (
    DEFAULT_INPUT_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPORT_NAME,
    FALSE_FLAG_VALUES,
    TRUE_FLAG_VALUES,
)
from core.errors import GradebookConfigError


@dataclass(frozen=True)
class GradebookConfig:
    """Validated runtime configuration.

    Attributes:
        input_path: Default input file when no source is given.
        report_name: File name of the report written next to the input.
        strict_quotes: Reject lines that end inside a quoted segment.
        log_level: Minimum structured log level name.
    """

    input_path: str
    report_name: str
    strict_quotes: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "GradebookConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            GradebookConfigError: If environment values are invalid.
        """
        input_path = os.getenv("GRADEBOOK_INPUT_PATH", DEFAULT_INPUT_PATH)
        report_name = parse_report_name(os.getenv("GRADEBOOK_REPORT_NAME", DEFAULT_REPORT_NAME))
        strict_quotes = parse_flag(
            os.getenv("GRADEBOOK_STRICT_QUOTES", "false"), "GRADEBOOK_STRICT_QUOTES"
        )
        log_level = parse_log_level(os.getenv("GRADEBOOK_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            input_path=input_path,
            report_name=report_name,
            strict_quotes=strict_quotes,
            log_level=log_level,
        )


def parse_flag(raw_value: str, variable_name: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        raw_value: Raw string from environment.
        variable_name: Variable name used in error messages.

    Returns:
        Parsed boolean value.

    Raises:
        GradebookConfigError: If value is not a recognized flag.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in TRUE_FLAG_VALUES:
        return True
    if normalized_value in FALSE_FLAG_VALUES:
        return False
    raise GradebookConfigError(
        f"Invalid {variable_name} value: expected one of "
        f"{', '.join(TRUE_FLAG_VALUES + FALSE_FLAG_VALUES)}, got '{raw_value}'."
    )


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Level name such as ``info`` or ``WARNING``.

    Returns:
        Upper-case standard level name.

    Raises:
        GradebookConfigError: If the level name is unknown.
    """
    level_name = raw_value.strip().upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise GradebookConfigError(
            f"Invalid GRADEBOOK_LOG_LEVEL value: '{raw_value}'. "
            "Use DEBUG, INFO, WARNING, ERROR, or CRITICAL."
        )
    return level_name


def parse_report_name(raw_value: str, source_name: str = "GRADEBOOK_REPORT_NAME") -> str:
    """Validate a report file name that must stay beside the input.

    Args:
        raw_value: Candidate file name.
        source_name: Setting name used in error messages.

    Returns:
        Trimmed file name.

    Raises:
        GradebookConfigError: If the value is empty, a directory reference,
            or contains a path separator.
    """
    report_name = raw_value.strip()
    if report_name in ("", ".", "..") or "/" in report_name or "\\" in report_name:
        raise GradebookConfigError(
            f"Invalid {source_name} value: '{raw_value}'. "
            "Provide a plain file name such as report.txt."
        )
    return report_name
