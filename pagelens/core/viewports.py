"""Screenshot loop over the fixed viewport list."""

from __future__ import annotations

import os
from pathlib import Path

from playwright.async_api import Page

from pagelens.core.log import LogAccumulator
from pagelens.models.types import CaptureArtifact, Severity, ViewportSpec


async def capture_viewports(
    page: Page,
    log: LogAccumulator,
    viewports: tuple[ViewportSpec, ...] | list[ViewportSpec],
    output_dir: str,
    layout_settle_ms: int = 500,
) -> list[CaptureArtifact]:
    """Resize, let layout reflow, screenshot. One failed viewport never stops the loop."""
    artifacts: list[CaptureArtifact] = []

    for viewport in viewports:
        filepath = os.path.join(output_dir, viewport.filename)
        try:
            # A leftover from an earlier run must not pass for this run's capture
            Path(filepath).unlink(missing_ok=True)
            await page.set_viewport_size(viewport.size)
            await page.wait_for_timeout(layout_settle_ms)
            await page.screenshot(path=filepath, full_page=False)
        except Exception as e:
            log.record(Severity.ERROR, f"Screenshot failed for {viewport.name}: {e}")
            continue

        artifacts.append(CaptureArtifact(viewport_name=viewport.name, file_path=filepath))
        log.info(f"Screenshot saved: {filepath} ({viewport.width}x{viewport.height})")

    return artifacts
