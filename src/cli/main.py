"""Gradebook CLI entry points.
This module exposes commands for grading, checking, and batch runs.
It maps argparse commands onto SDK calls and renders typed failures.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from cli.check_command import add_check_command, run_check_command
from cli.grade_command import add_grade_command, run_grade_command
from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import GradebookConfig, parse_log_level
from core.errors import GradebookError, UnexpectedFailureError
from core.logging_config import configure_logging, get_logger
from report.gradebook_sdk import GradebookClient

_LOGGER = get_logger(__name__)

_ERROR_LABELS: dict[str, str] = {
    "config": "Config error",
    "run_spec": "Run spec error",
    "source_read": "File error",
    "source_not_found": "File error",
    "missing_field": "Missing field",
    "unterminated_quote": "Missing field",
    "invalid_id_format": "Invalid id",
    "invalid_score_format": "Invalid score",
    "write_failure": "Write error",
}
_DEFAULT_ERROR_LABEL = "Unexpected error"


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="gradebook", description="Student grade report CLI")
    parser.add_argument("--log-level", help="Override GRADEBOOK_LOG_LEVEL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_grade_command(subparsers)
    add_check_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Gradebook CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code: 0 on success, 1 on any failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.log_level)
        return _dispatch(parser, client, args)
    except GradebookError as error:
        return _report_failure(args.command, error)
    except Exception as error:
        unexpected = UnexpectedFailureError(f"{type(error).__name__}: {error}")
        unexpected.__cause__ = error
        return _report_failure(args.command, unexpected)


def format_error(error: GradebookError) -> str:
    """Render a one-line categorized message for a typed failure."""
    label = _ERROR_LABELS.get(error.kind, _DEFAULT_ERROR_LABEL)
    return f"{label}: {error}"


def _report_failure(command: str, error: GradebookError) -> int:
    _LOGGER.info("command_failed", command=command, kind=error.kind, message=str(error))
    print(format_error(error))
    return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    client: GradebookClient,
    args: argparse.Namespace,
) -> int:
    if args.command == "grade":
        return run_grade_command(client, args)
    if args.command == "check":
        return run_check_command(client, args)
    if args.command == "run-spec":
        return run_run_spec_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(log_level: str | None) -> GradebookClient:
    """Build SDK client with optional log-level override.

    Args:
        log_level: Optional level name.

    Returns:
        Configured SDK client.
    """
    config = GradebookConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    configure_logging(config.log_level)
    return GradebookClient(config)
