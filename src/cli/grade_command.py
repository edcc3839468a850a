"""Grade command wiring for Gradebook CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.types import GradingOptions
from report.gradebook_sdk import GradebookClient


def add_grade_command(subparsers: Any) -> None:
    """Register grade subcommand."""
    parser = subparsers.add_parser(
        "grade",
        help="Read a student file and write its graded report",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Input file; defaults to GRADEBOOK_INPUT_PATH or students.txt",
    )
    parser.add_argument("--output", help="Report path; defaults to a sibling of the input")
    parser.add_argument("--report-name", help="Report file name used next to the input")
    parser.add_argument(
        "--strict-quotes",
        action="store_true",
        default=None,
        help="Reject lines that end inside a quoted field",
    )


def run_grade_command(client: GradebookClient, args: argparse.Namespace) -> int:
    """Handle grade command."""
    options = GradingOptions(
        source_path=args.source or client.config.input_path,
        output_path=args.output,
        report_name=args.report_name,
        strict_quotes=args.strict_quotes,
    )
    result = client.grade(options)
    print(
        f"Loaded {result.record_count} students from: {result.source_path}; "
        f"report written to: {result.report_path}"
    )
    return 0
