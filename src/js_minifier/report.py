"""Plain text rendering of minification outcomes."""

from __future__ import annotations

from .errors import describe_error
from .models import BatchReport

ERROR_MARKER = "---ERROR  \n\n\n"


def render_error(exc: BaseException | None) -> str:
    return ERROR_MARKER + describe_error(exc)


def render_batch_report(report: BatchReport) -> str:
    succeeded = report.succeeded
    failed = report.failed
    lines = [
        "=== FOLDER MINIFICATION COMPLETE ===\n\n",
        f"Processed: {report.total} files\n",
        f"Succeeded: {len(succeeded)}\n",
        f"Failed: {len(failed)}\n\n",
    ]
    if succeeded:
        lines.append("--- SUCCEEDED ---\n")
        lines.extend(f"{result.source} -> {result.output}\n" for result in succeeded)
        lines.append("\n")
    if failed:
        lines.append("--- FAILED ---\n")
        lines.extend(f"{result.source}: {result.error}\n" for result in failed)
    return "".join(lines)


__all__ = ["ERROR_MARKER", "render_batch_report", "render_error"]
