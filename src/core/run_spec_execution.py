"""Shared run-spec execution engine for CLI and SDK workflows.

This module maps validated run-spec steps to client operations so different
entry points can execute one declarative batch without drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from core.config import GradebookConfig
from core.errors import GradebookRunSpecError
from core.run_spec import RunSpec, RunSpecDefaults, RunSpecStep, load_run_spec
from core.run_spec_fields import optional_bool, optional_path, optional_report_name
from core.types import GradingOptions, GradingResult, StudentRecord


class RunSpecClient(Protocol):
    """Client API contract required by run-spec execution."""

    @property
    def config(self) -> GradebookConfig: ...

    def load_records(
        self,
        source_path: str | Path,
        strict_quotes: bool | None = None,
    ) -> list[StudentRecord]: ...

    def grade(self, options: GradingOptions) -> GradingResult: ...


@dataclass(frozen=True)
class RunSpecExecutionContext:
    """In-memory context used to execute run-spec steps."""

    client: RunSpecClient
    defaults: RunSpecDefaults
    base_dir: Path


def execute_run_spec_file(client: RunSpecClient, spec_file: str) -> tuple[str, ...]:
    """Load and execute a run-spec file, returning printable output lines."""
    spec = load_run_spec(spec_file)
    return execute_run_spec(client, spec)


def execute_run_spec(client: RunSpecClient, spec: RunSpec) -> tuple[str, ...]:
    """Execute a parsed run-spec object and return output lines.

    Steps run in order and the first failure propagates unchanged.
    """
    context = RunSpecExecutionContext(
        client=client,
        defaults=spec.defaults,
        base_dir=spec.base_dir,
    )
    return tuple(_execute_step(context, step) for step in spec.steps)


def _execute_step(context: RunSpecExecutionContext, step: RunSpecStep) -> str:
    if step.command == "grade":
        return _execute_grade_step(context, step)
    if step.command == "check":
        return _execute_check_step(context, step)
    raise GradebookRunSpecError(f"Unsupported run-spec command '{step.command}'.")


def _execute_grade_step(context: RunSpecExecutionContext, step: RunSpecStep) -> str:
    options = GradingOptions(
        source_path=_resolve_input(context, step),
        output_path=optional_path(step.args, "output", context.base_dir),
        report_name=optional_report_name(step.args) or context.defaults.report_name,
        strict_quotes=_resolve_strict_quotes(context, step),
    )
    result = context.client.grade(options)
    return (
        f"grade source={result.source_path} "
        f"records={result.record_count} report={result.report_path}"
    )


def _execute_check_step(context: RunSpecExecutionContext, step: RunSpecStep) -> str:
    source_path = _resolve_input(context, step)
    records = context.client.load_records(source_path, _resolve_strict_quotes(context, step))
    return f"check source={source_path} records={len(records)}"


def _resolve_input(context: RunSpecExecutionContext, step: RunSpecStep) -> str:
    source_path = optional_path(step.args, "input", context.base_dir)
    if source_path is not None:
        return source_path
    return str(context.base_dir / context.client.config.input_path)


def _resolve_strict_quotes(context: RunSpecExecutionContext, step: RunSpecStep) -> bool | None:
    strict_quotes = optional_bool(step.args, "strict_quotes")
    if strict_quotes is not None:
        return strict_quotes
    return context.defaults.strict_quotes
