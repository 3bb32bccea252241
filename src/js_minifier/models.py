"""Domain models for minification runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Literal, Sequence


@dataclass(slots=True)
class LiteralSegment:
    """One static text fragment of a template literal."""

    raw: str
    cooked: str | None
    index: int
    count: int

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.count - 1


SegmentPass = Callable[[Sequence[LiteralSegment]], list[LiteralSegment]]


@dataclass(frozen=True, slots=True)
class MinifyOptions:
    """Configuration for a single minification run.

    Regex constructor rewriting and constant folding are never performed.
    """

    remove_console: bool = True
    remove_debugger: bool = True
    remove_dead_code: bool = True
    strip_comments: bool = True
    normalize_templates: bool = True
    source_type: Literal["module", "script"] = "module"
    template_passes: tuple[SegmentPass, ...] = ()


@dataclass(slots=True)
class FileResult:
    """Outcome of minifying one file."""

    source: Path
    output: Path
    success: bool
    content: str | None = None
    error: str | None = None
    error_code: str | None = None


@dataclass(slots=True)
class BatchReport:
    """Ordered results of a folder minification."""

    root: Path
    results: list[FileResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[FileResult]:
        return [result for result in self.results if result.success]

    @property
    def failed(self) -> list[FileResult]:
        return [result for result in self.results if not result.success]

    @property
    def total(self) -> int:
        return len(self.results)


__all__ = [
    "LiteralSegment",
    "SegmentPass",
    "MinifyOptions",
    "FileResult",
    "BatchReport",
]
