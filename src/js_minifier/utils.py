from __future__ import annotations

import asyncio
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from .errors import OutputWriteError, WalkError

T = TypeVar("T")


def minified_path(source: Path, source_suffix: str = ".js", minified_suffix: str = ".min.js") -> Path:
    """Return *source* with its trailing source suffix swapped for the minified one."""

    name = source.name
    if name.endswith(source_suffix):
        name = name[: -len(source_suffix)]
    return source.with_name(name + minified_suffix)


def is_eligible(name: str, source_suffix: str = ".js", minified_suffix: str = ".min.js") -> bool:
    return name.endswith(source_suffix) and not name.endswith(minified_suffix)


def _raise_walk_error(exc: OSError) -> None:
    raise WalkError(str(exc)) from exc


def find_source_files(
    root: Path, *, source_suffix: str = ".js", minified_suffix: str = ".min.js"
) -> list[Path]:
    """Collect every eligible source file below *root*.

    The whole tree is walked before anything is returned, so an unreadable
    directory aborts the walk without partial results.
    """

    if not root.exists():
        raise WalkError(f"No such file or directory: '{root}'")
    if not root.is_dir():
        raise WalkError(f"Not a directory: '{root}'")
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        base = Path(dirpath)
        for filename in sorted(filenames):
            candidate = base / filename
            if candidate.is_file() and is_eligible(filename, source_suffix, minified_suffix):
                found.append(candidate)
    return found


def write_output(path: Path, code: str, encoding: str = "utf-8") -> None:
    try:
        path.write_text(code + "\n", encoding=encoding)
    except OSError as exc:
        raise OutputWriteError(str(exc)) from exc


async def run_sync(func: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
    """Execute *func* in a worker thread and return the result."""

    return await asyncio.to_thread(func, *args, **kwargs)


__all__ = [
    "is_eligible",
    "find_source_files",
    "minified_path",
    "run_sync",
    "write_output",
]
