"""Run orchestration: one browser, one target, one verdict.

Phases run strictly in sequence (navigate + settle, then the viewport loop,
then publishing). Page events keep arriving during every await and land in
the same LogAccumulator.
"""

from __future__ import annotations

from pathlib import Path

from playwright.async_api import Page, async_playwright
from rich.console import Console

from pagelens.core.config import CaptureConfig
from pagelens.core.log import LogAccumulator
from pagelens.core.navigator import navigate
from pagelens.core.report import build_summary, print_report, write_artifacts
from pagelens.core.viewports import capture_viewports
from pagelens.detectors.events import EventClassifier
from pagelens.models.types import CaptureArtifact, RunSummary


class PageCapturer:
    """Captures console output, crashes, failed requests and screenshots for one URL."""

    def __init__(self, config: CaptureConfig, console: Console | None = None):
        self.config = config
        self.console = console or Console(highlight=False)
        self.log = LogAccumulator(console=self.console)
        self.artifacts: list[CaptureArtifact] = []

    async def capture(self) -> RunSummary:
        cfg = self.config
        Path(cfg.output_dir).mkdir(parents=True, exist_ok=True)

        self.log.info(f"Starting capture for {cfg.url}")

        async with async_playwright() as pw:
            browser = await pw.chromium.launch(headless=not cfg.headful)
            try:
                ctx = await browser.new_context()
                page = await ctx.new_page()
                await self.run_on_page(page)
            finally:
                await browser.close()

        summary = build_summary(cfg.url, self.log, self.artifacts)
        write_artifacts(summary, self.log, cfg.log_file, cfg.summary_file)
        print_report(summary, cfg.log_file, console=self.console)
        return summary

    async def run_on_page(self, page: Page) -> list[CaptureArtifact]:
        cfg = self.config
        EventClassifier(self.log).attach_listeners(page)

        await navigate(page, self.log, cfg.url, cfg.timeout_ms, cfg.settle_ms)

        self.artifacts = await capture_viewports(
            page,
            self.log,
            cfg.viewports,
            cfg.output_dir,
            layout_settle_ms=cfg.layout_settle_ms,
        )
        return self.artifacts
