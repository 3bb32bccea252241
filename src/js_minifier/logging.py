from __future__ import annotations

import json
import threading
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .models import BatchReport


@dataclass(slots=True)
class RunLogEntry:
    source: str
    output: str
    status: str
    error_code: str | None
    error: str | None
    size_bytes: int
    elapsed_ms: float
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["kind"] = "file"
        return payload


@dataclass(slots=True)
class BatchSummary:
    root: str
    timestamp: float = field(default_factory=time.time)
    total: int = 0
    successes: int = 0
    failures: int = 0

    @classmethod
    def from_report(cls, report: BatchReport) -> BatchSummary:
        return cls(
            root=str(report.root),
            total=report.total,
            successes=len(report.succeeded),
            failures=len(report.failed),
        )

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["kind"] = "batch"
        payload["timestamp"] = time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(self.timestamp))
        return payload


class RunLogger:
    """Append-only JSONL log of processed files."""

    def __init__(self, log_file: Path | None) -> None:
        self._log_file = log_file
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self._log_file is not None

    def append(self, entry: RunLogEntry | BatchSummary) -> None:
        if self._log_file is None:
            return
        line = json.dumps(entry.to_dict(), ensure_ascii=False)
        with self._lock:
            self._log_file.parent.mkdir(parents=True, exist_ok=True)
            with self._log_file.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
