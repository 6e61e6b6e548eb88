"""Run configuration for a single capture.

Everything except the viewport list can be supplied through the environment
(and overridden again by CLI flags). The viewport list is fixed so that
screenshot names stay comparable between runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping

from pagelens.models.types import ViewportSpec


DEFAULT_URL = "http://localhost:8080"
DEFAULT_OUTPUT_DIR = "preview_output"
DEFAULT_TIMEOUT_MS = 15000
DEFAULT_SETTLE_MS = 3000  # WASM startup + first render
LAYOUT_SETTLE_MS = 500

DEFAULT_VIEWPORTS: tuple[ViewportSpec, ...] = (
    ViewportSpec("desktop", 1920, 1080),
    ViewportSpec("mobile", 390, 844),
    ViewportSpec("tablet", 1024, 768),
)

LOG_FILENAME = "console.log"
SUMMARY_FILENAME = "summary.json"

# Schemes written without "//", e.g. about:blank
OPAQUE_SCHEMES = ("about:", "data:", "blob:")


@dataclass(frozen=True)
class CaptureConfig:
    url: str = DEFAULT_URL
    output_dir: str = DEFAULT_OUTPUT_DIR
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    settle_ms: int = DEFAULT_SETTLE_MS
    layout_settle_ms: int = LAYOUT_SETTLE_MS
    headful: bool = False
    viewports: tuple[ViewportSpec, ...] = field(default=DEFAULT_VIEWPORTS)

    @property
    def log_file(self) -> str:
        return os.path.join(self.output_dir, LOG_FILENAME)

    @property
    def summary_file(self) -> str:
        return os.path.join(self.output_dir, SUMMARY_FILENAME)

    def with_overrides(self, **overrides) -> CaptureConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(env: Mapping[str, str] | None = None) -> CaptureConfig:
    env = os.environ if env is None else env
    return CaptureConfig(
        url=env.get("APP_URL") or DEFAULT_URL,
        output_dir=env.get("PAGELENS_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
        timeout_ms=_parse_int(env.get("PAGELENS_TIMEOUT_MS"), DEFAULT_TIMEOUT_MS),
        settle_ms=_parse_int(env.get("PAGELENS_SETTLE_MS"), DEFAULT_SETTLE_MS),
        headful=_parse_bool(env.get("PAGELENS_HEADFUL", "")),
    )


def normalize_url(url: str) -> str:
    """Prefix http:// only when url carries no scheme of its own."""
    url = url.strip()
    if "://" in url or url.lower().startswith(OPAQUE_SCHEMES):
        return url
    return f"http://{url}"


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes")
