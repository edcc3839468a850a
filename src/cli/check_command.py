"""Check command wiring for Gradebook CLI.

The check command validates an input file without writing a report.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from report.gradebook_sdk import GradebookClient


def add_check_command(subparsers: Any) -> None:
    """Register check subcommand."""
    parser = subparsers.add_parser("check", help="Validate a student file without a report")
    parser.add_argument(
        "source",
        nargs="?",
        help="Input file; defaults to GRADEBOOK_INPUT_PATH or students.txt",
    )
    parser.add_argument(
        "--strict-quotes",
        action="store_true",
        default=None,
        help="Reject lines that end inside a quoted field",
    )


def run_check_command(client: GradebookClient, args: argparse.Namespace) -> int:
    """Handle check command."""
    source_path = Path(args.source or client.config.input_path).expanduser().resolve()
    records = client.load_records(source_path, args.strict_quotes)
    print(f"Validated {len(records)} students from: {source_path}")
    return 0
