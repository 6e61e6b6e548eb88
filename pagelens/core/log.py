"""Ordered, single-writer record of everything observed during a run.

Playwright dispatches page events on the same event loop that drives the
capture, so entries arrive one at a time and insertion order is
chronological order.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console

from pagelens.models.types import LogEntry, Severity, utc_timestamp


SEVERITY_STYLES = {
    Severity.INFO: "dim",
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.CRASH: "red bold",
    Severity.NETWORK: "magenta",
    Severity.CONSOLE: "white",
    Severity.WEBGL: "cyan",
}


class LogAccumulator:
    """Append-only log for one capture run, mirrored live to the console."""

    def __init__(self, console: Console | None = None, clock: Callable[[], str] = utc_timestamp):
        self._entries: list[LogEntry] = []
        self._console = console or Console(highlight=False)
        self._clock = clock

    def record(self, severity: Severity, message: str) -> LogEntry:
        entry = LogEntry(timestamp=self._clock(), severity=severity, message=message)
        self._entries.append(entry)
        self._console.print(
            entry.to_line(),
            style=SEVERITY_STYLES.get(severity, ""),
            markup=False,
            highlight=False,
        )
        return entry

    def info(self, message: str) -> LogEntry:
        return self.record(Severity.INFO, message)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def error_messages(self) -> list[str]:
        return [e.message for e in self._entries if e.severity.is_failure]

    def warning_messages(self) -> list[str]:
        return [e.message for e in self._entries if e.severity == Severity.WARNING]

    @property
    def error_count(self) -> int:
        return sum(1 for e in self._entries if e.severity.is_failure)

    @property
    def warning_count(self) -> int:
        return sum(1 for e in self._entries if e.severity == Severity.WARNING)

    @property
    def success(self) -> bool:
        return self.error_count == 0

    def render(self) -> str:
        return "\n".join(e.to_line() for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)
