"""Reduce a finished run into a RunSummary, write the artifacts, and print the verdict."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from pagelens.core.log import LogAccumulator
from pagelens.models.types import CaptureArtifact, RunSummary


def build_summary(url: str, log: LogAccumulator, artifacts: list[CaptureArtifact]) -> RunSummary:
    errors = log.error_messages()
    warnings = log.warning_messages()
    return RunSummary(
        url=url,
        success=not errors,
        error_count=len(errors),
        warning_count=len(warnings),
        screenshots=[a.file_path for a in artifacts],
        errors=errors,
        warnings=warnings,
    )


def write_artifacts(
    summary: RunSummary,
    log: LogAccumulator,
    log_file: str,
    summary_file: str,
):
    """Overwrite console.log and summary.json with this run's state."""
    Path(log_file).write_text(log.render(), encoding="utf-8")
    Path(summary_file).write_text(
        json.dumps(summary.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )


def print_report(summary: RunSummary, log_file: str, console: Console | None = None):
    console = console or Console()

    status_style = "green bold" if summary.success else "red bold"
    body = Text()
    body.append("Status: ", style="bold")
    body.append("SUCCESS" if summary.success else "ERRORS DETECTED", style=status_style)
    body.append(f"\nErrors: {summary.error_count}")
    body.append(f"\nWarnings: {summary.warning_count}")
    body.append(f"\nScreenshots: {len(summary.screenshots)}")
    body.append(f"\nLog file: {log_file}", style="dim")

    console.print()
    console.print(Panel(body, title="CAPTURE COMPLETE", border_style="green" if summary.success else "red"))
    console.print()
