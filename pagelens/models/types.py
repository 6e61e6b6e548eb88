from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Severity(str, Enum):
    INFO = "INFO"
    ERROR = "ERROR"
    WARNING = "WARNING"
    CRASH = "CRASH"
    NETWORK = "NETWORK"
    CONSOLE = "CONSOLE"
    WEBGL = "WEBGL"

    @property
    def is_failure(self) -> bool:
        """Only ERROR and CRASH entries fail a run; everything else is advisory."""
        return self in (Severity.ERROR, Severity.CRASH)


def utc_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    severity: Severity
    message: str

    def to_line(self) -> str:
        return f"[{self.timestamp}] [{self.severity.value}] {self.message}"


@dataclass(frozen=True)
class ViewportSpec:
    name: str
    width: int
    height: int

    @property
    def size(self) -> dict:
        return {"width": self.width, "height": self.height}

    @property
    def filename(self) -> str:
        return f"screenshot_{self.name}.png"


@dataclass(frozen=True)
class CaptureArtifact:
    viewport_name: str
    file_path: str


@dataclass(frozen=True)
class RunSummary:
    url: str
    success: bool
    error_count: int
    warning_count: int
    screenshots: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "url": self.url,
            "success": self.success,
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
            "screenshots": list(self.screenshots),
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
