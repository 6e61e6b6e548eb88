"""Maps raw page signals (console, uncaught errors, failed requests) to log severities."""

from __future__ import annotations

from pagelens.core.log import LogAccumulator
from pagelens.models.types import Severity


RENDERER_LOSS_MARKERS = ("CONTEXT_LOST", "WebGL")

Classified = list[tuple[Severity, str]]


def classify_console(msg_type: str, text: str) -> Classified:
    """A console line can yield two entries: its mapped level plus a WEBGL tag."""
    if msg_type == "error":
        severity = Severity.ERROR
    elif msg_type == "warning":
        severity = Severity.WARNING
    else:
        severity = Severity.CONSOLE

    classified = [(severity, text)]
    if any(marker in text for marker in RENDERER_LOSS_MARKERS):
        classified.append((Severity.WEBGL, text))
    return classified


def classify_page_error(message: str, stack: str | None = None) -> Classified:
    text = f"{message}\n{stack}" if stack else message
    return [(Severity.CRASH, text)]


def classify_request_failure(url: str, failure: str | None = None) -> Classified:
    return [(Severity.NETWORK, f"Failed to load: {url} - {failure or 'unknown'}")]


class EventClassifier:
    """Subscribes to Playwright page events and records every one of them."""

    def __init__(self, log: LogAccumulator):
        self.log = log

    def attach_listeners(self, page):
        page.on("console", self.on_console)
        page.on("pageerror", self.on_page_error)
        page.on("requestfailed", self.on_request_failed)

    def on_console(self, msg):
        self._record(classify_console(msg.type, msg.text))

    def on_page_error(self, error):
        message = getattr(error, "message", None) or str(error)
        self._record(classify_page_error(message, getattr(error, "stack", None)))

    def on_request_failed(self, request):
        self._record(classify_request_failure(request.url, request.failure))

    def _record(self, classified: Classified):
        for severity, message in classified:
            self.log.record(severity, message)
