from __future__ import annotations

import concurrent.futures
import logging
import time
from pathlib import Path
from typing import Callable

from .config import AppConfig
from .engine import transform
from .errors import MinifyError
from .logging import BatchSummary, RunLogEntry, RunLogger
from .models import BatchReport, FileResult, MinifyOptions
from .utils import find_source_files, minified_path, write_output

logger = logging.getLogger(__name__)

Transformer = Callable[[Path, MinifyOptions], str]


class MinifyService:
    def __init__(self, config: AppConfig, *, transformer: Transformer = transform) -> None:
        self._config = config
        self._transform = transformer
        self._run_logger = RunLogger(config.runtime.log_file)

    @property
    def config(self) -> AppConfig:
        return self._config

    def options(self) -> MinifyOptions:
        return self._config.minify.to_options()

    def output_path(self, source: Path) -> Path:
        runtime = self._config.runtime
        return minified_path(source, runtime.source_suffix, runtime.minified_suffix)

    def minify_file(self, path: Path) -> FileResult:
        """Minify a single file without writing anything.

        Errors propagate unchanged so callers can render them.
        """

        start = time.perf_counter()
        output = self.output_path(path)
        try:
            code = self._transform(path, self.options())
        except MinifyError as exc:
            self._log_result(path, output, start, error=exc)
            raise
        self._log_result(path, output, start, size_bytes=len(code.encode("utf-8")))
        return FileResult(source=path, output=output, success=True, content=code)

    def minify_and_write(self, path: Path) -> FileResult:
        output = self.output_path(path)
        logger.info("Minifying: %s -> %s", path, output)
        start = time.perf_counter()
        try:
            code = self._transform(path, self.options())
            write_output(output, code)
        except (MinifyError, OSError) as exc:
            self._log_result(path, output, start, error=exc)
            return FileResult(
                source=path,
                output=output,
                success=False,
                error=str(exc),
                error_code=getattr(exc, "code", None),
            )
        self._log_result(path, output, start, size_bytes=len(code.encode("utf-8")))
        return FileResult(source=path, output=output, success=True)

    def minify_folder(self, root: Path, *, parallelism: int | None = None) -> BatchReport:
        """Minify every eligible file under *root* into sibling outputs.

        Raises ``WalkError`` when the folder cannot be enumerated. Results are
        returned in discovery order.
        """

        runtime = self._config.runtime
        paths = find_source_files(
            root,
            source_suffix=runtime.source_suffix,
            minified_suffix=runtime.minified_suffix,
        )
        workers = max(1, parallelism or runtime.parallelism)
        if workers == 1 or len(paths) < 2:
            results = [self.minify_and_write(path) for path in paths]
        else:
            with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(self.minify_and_write, paths))
        report = BatchReport(root=root, results=results)
        self._run_logger.append(BatchSummary.from_report(report))
        return report

    def _log_result(
        self,
        source: Path,
        output: Path,
        start: float,
        *,
        size_bytes: int = 0,
        error: BaseException | None = None,
    ) -> None:
        if not self._run_logger.enabled:
            return
        self._run_logger.append(
            RunLogEntry(
                source=str(source),
                output=str(output),
                status="failure" if error is not None else "success",
                error_code=getattr(error, "code", None),
                error=str(error) if error is not None else None,
                size_bytes=size_bytes,
                elapsed_ms=(time.perf_counter() - start) * 1000,
            )
        )


__all__ = ["MinifyService", "Transformer"]
