"""Fake Playwright objects shared by the test suite."""

import io
from collections import defaultdict
from pathlib import Path

import pytest
from rich.console import Console

from pagelens.core.config import CaptureConfig
from pagelens.core.log import LogAccumulator


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class FakeConsoleMessage:
    def __init__(self, type: str, text: str):
        self.type = type
        self.text = text


class FakePageError:
    def __init__(self, message: str, stack: str | None = None):
        self.message = message
        self.stack = stack


class FakeRequest:
    def __init__(self, url: str, failure: str | None = None):
        self.url = url
        self.failure = failure


class FakeResponse:
    def __init__(self, status: int):
        self.status = status


class FakePage:
    """Mimics the slice of playwright.async_api.Page the capturer uses."""

    def __init__(self, status=200, goto_error=None, failing_viewports=(), events_during_goto=(), wait_error=None):
        self.handlers = defaultdict(list)
        self.status = status
        self.goto_error = goto_error
        self.failing_viewports = set(failing_viewports)
        self.events_during_goto = list(events_during_goto)
        self.wait_error = wait_error
        self.goto_calls = []
        self.waits = []
        self.viewport_sizes = []
        self.screenshot_calls = []

    def on(self, event, handler):
        self.handlers[event].append(handler)

    def emit(self, event, payload):
        for handler in self.handlers[event]:
            handler(payload)

    async def goto(self, url, timeout=None, wait_until=None):
        self.goto_calls.append({"url": url, "timeout": timeout, "wait_until": wait_until})
        for event, payload in self.events_during_goto:
            self.emit(event, payload)
        if self.goto_error:
            raise self.goto_error
        return FakeResponse(self.status) if self.status is not None else None

    async def wait_for_timeout(self, timeout):
        self.waits.append(timeout)
        if self.wait_error:
            raise self.wait_error

    async def set_viewport_size(self, size):
        self.viewport_sizes.append(dict(size))

    async def screenshot(self, path=None, full_page=False):
        self.screenshot_calls.append({"path": path, "full_page": full_page})
        for name in self.failing_viewports:
            if Path(path).name == f"screenshot_{name}.png":
                raise RuntimeError("Target page, context or browser has been closed")
        Path(path).write_bytes(PNG_BYTES)
        return PNG_BYTES


class FakeContext:
    def __init__(self, page):
        self.page = page

    async def new_page(self):
        return self.page


class FakeBrowser:
    def __init__(self, page, new_context_error=None):
        self.page = page
        self.new_context_error = new_context_error
        self.closed = False

    async def new_context(self):
        if self.new_context_error:
            raise self.new_context_error
        return FakeContext(self.page)

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser):
        self.browser = browser
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self, browser):
        self.chromium = FakeChromium(browser)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=240, highlight=False)


@pytest.fixture
def log(console):
    return LogAccumulator(console=console, clock=lambda: "2026-01-01T00:00:00.000Z")


@pytest.fixture
def config(tmp_path):
    return CaptureConfig(
        url="http://localhost:8080",
        output_dir=str(tmp_path / "preview_output"),
        timeout_ms=15000,
        settle_ms=3000,
    )


@pytest.fixture
def install_browser(monkeypatch):
    """Patch async_playwright in the capturer so it drives the given FakePage."""

    def _install(page, **browser_kwargs):
        browser = FakeBrowser(page, **browser_kwargs)
        pw = FakePlaywright(browser)
        monkeypatch.setattr("pagelens.core.capturer.async_playwright", lambda: pw)
        return pw

    return _install
