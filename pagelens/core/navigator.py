"""Navigation and post-load settle.

The settle is a fixed wait, not a readiness poll: the page under test exposes
no "ready" signal, so the WASM renderer simply gets a fixed budget to start up
and paint before anything is measured.
"""

from __future__ import annotations

from playwright.async_api import Page

from pagelens.core.log import LogAccumulator
from pagelens.models.types import Severity


async def navigate(
    page: Page,
    log: LogAccumulator,
    url: str,
    timeout_ms: int,
    settle_ms: int,
):
    """Load url and wait settle_ms.

    A failed navigation or settle is recorded as CRASH and never raised:
    whatever the browser managed to render is still worth screenshotting.
    """
    log.info("Navigating to page...")
    try:
        response = await page.goto(url, timeout=timeout_ms, wait_until="domcontentloaded")
        if response:
            log.info(f"Page loaded with status: {response.status}")
    except Exception as e:
        log.record(Severity.CRASH, f"Navigation failed: {e}")

    log.info(f"Waiting {settle_ms}ms for WASM initialization...")
    try:
        await page.wait_for_timeout(settle_ms)
    except Exception as e:
        log.record(Severity.CRASH, f"Settle wait failed: {e}")
