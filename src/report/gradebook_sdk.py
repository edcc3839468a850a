"""Python SDK for grading workflows.

This module exposes high-level APIs for loading records, writing
reports, and running the full grade workflow.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable

from core.config import GradebookConfig, parse_report_name
from core.errors import GradebookError, UnexpectedFailureError
from core.types import GradingOptions, GradingResult, StudentRecord
from ingest.pipeline import ingest_student_records
from report.report_writer import derive_report_path, write_report


class GradebookClient:
    """Primary SDK entry point for grading workflows."""

    def __init__(self, config: GradebookConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or GradebookConfig.from_env()

    @property
    def config(self) -> GradebookConfig:
        """Runtime configuration used by this client."""
        return self._config

    def load_records(
        self,
        source_path: str | Path,
        strict_quotes: bool | None = None,
    ) -> list[StudentRecord]:
        """Load and validate all records from a source file.

        Args:
            source_path: Input file path.
            strict_quotes: Optional override for the configured quote policy.

        Returns:
            Records in file order.

        Raises:
            GradebookIngestError: If the source or any record is invalid.
        """
        return ingest_student_records(source_path, self._resolve_config(strict_quotes))

    def write_report(self, records: Iterable[StudentRecord], output_path: str | Path) -> Path:
        """Write a report file.

        Raises:
            WriteFailureError: If the destination cannot be written.
        """
        return write_report(records, output_path)

    def grade(self, options: GradingOptions) -> GradingResult:
        """Load a source and write its report.

        Args:
            options: Grade options.

        Returns:
            Resolved paths and the reported records.

        Raises:
            GradebookConfigError: If the report name is not a plain file name.
            GradebookIngestError: If the source or any record is invalid.
            WriteFailureError: If the report cannot be written.
            UnexpectedFailureError: For any unclassified failure.
        """
        try:
            return self._grade(options)
        except GradebookError:
            raise
        except Exception as error:
            raise UnexpectedFailureError(
                f"Grading {options.source_path} failed unexpectedly: {error}"
            ) from error

    def _grade(self, options: GradingOptions) -> GradingResult:
        source_path = Path(options.source_path).expanduser().resolve()
        report_name = self._config.report_name
        if options.report_name is not None:
            report_name = parse_report_name(options.report_name, "report_name")
        records = self.load_records(source_path, options.strict_quotes)
        output_path = options.output_path or derive_report_path(source_path, report_name)
        report_path = self.write_report(records, output_path)
        return GradingResult(
            source_path=source_path,
            report_path=report_path,
            records=tuple(records),
        )

    def _resolve_config(self, strict_quotes: bool | None) -> GradebookConfig:
        if strict_quotes is None:
            return self._config
        return replace(self._config, strict_quotes=strict_quotes)
