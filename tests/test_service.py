import json
from pathlib import Path

import pytest

from js_minifier.config import AppConfig, RuntimeConfig
from js_minifier.core import MinifyService
from js_minifier.errors import InputNotFoundError, TransformError, WalkError


def test_minify_file_returns_content_without_writing(config: AppConfig, transformer, tmp_path: Path) -> None:
    source = tmp_path / "one.js"
    source.write_text("var x = 1;\n", encoding="utf-8")
    service = MinifyService(config, transformer=transformer)
    result = service.minify_file(source)
    assert result.success
    assert result.content == "varx=1;"
    assert result.output == tmp_path / "one.min.js"
    assert not result.output.exists()


def test_minify_file_propagates_errors(config: AppConfig, transformer, tmp_path: Path) -> None:
    source = tmp_path / "bad.js"
    source.write_text("BROKEN", encoding="utf-8")
    service = MinifyService(config, transformer=transformer)
    with pytest.raises(TransformError):
        service.minify_file(source)


def test_minify_folder_writes_outputs_with_trailing_newline(config: AppConfig, transformer, source_tree: Path) -> None:
    service = MinifyService(config, transformer=transformer)
    report = service.minify_folder(source_tree)
    assert report.total == 3
    assert len(report.succeeded) == 3
    assert (source_tree / "app.min.js").read_text(encoding="utf-8") == "vara=1;\n"
    assert (source_tree / "lib" / "util.min.js").read_text(encoding="utf-8") == "varb=2;\n"
    assert (source_tree / "lib" / "vendor" / "dep.min.js").exists()


def test_minify_folder_does_not_reprocess_outputs(config: AppConfig, transformer, source_tree: Path) -> None:
    service = MinifyService(config, transformer=transformer)
    first = service.minify_folder(source_tree)
    second = service.minify_folder(source_tree)
    assert [r.source for r in first.results] == [r.source for r in second.results]
    assert not (source_tree / "app.min.min.js").exists()


def test_minify_folder_isolates_failures(config: AppConfig, transformer, source_tree: Path) -> None:
    (source_tree / "lib" / "util.js").write_text("BROKEN", encoding="utf-8")
    service = MinifyService(config, transformer=transformer)
    report = service.minify_folder(source_tree)
    assert report.total == 3
    assert len(report.succeeded) == 2
    assert len(report.failed) == 1
    assert len(report.succeeded) + len(report.failed) == report.total
    failure = report.failed[0]
    assert failure.source == source_tree / "lib" / "util.js"
    assert "Unexpected token" in (failure.error or "")
    assert failure.error_code == "PARSE_ERROR"
    assert not (source_tree / "lib" / "util.min.js").exists()


def test_minify_folder_parallel_preserves_discovery_order(transformer, source_tree: Path) -> None:
    config = AppConfig(runtime=RuntimeConfig(parallelism=4))
    service = MinifyService(config, transformer=transformer)
    sequential = service.minify_folder(source_tree, parallelism=1)
    parallel = service.minify_folder(source_tree)
    assert [r.source for r in parallel.results] == [r.source for r in sequential.results]


def test_minify_folder_missing_root_raises(config: AppConfig, transformer, tmp_path: Path) -> None:
    service = MinifyService(config, transformer=transformer)
    with pytest.raises(WalkError):
        service.minify_folder(tmp_path / "absent")


def test_run_log_records_files_and_batches(config: AppConfig, transformer, source_tree: Path) -> None:
    (source_tree / "app.js").write_text("BROKEN", encoding="utf-8")
    service = MinifyService(config, transformer=transformer)
    service.minify_folder(source_tree)
    assert config.runtime.log_file is not None
    lines = [json.loads(line) for line in config.runtime.log_file.read_text(encoding="utf-8").splitlines()]
    kinds = [line["kind"] for line in lines]
    assert kinds == ["file", "file", "file", "batch"]
    statuses = sorted(line["status"] for line in lines if line["kind"] == "file")
    assert statuses == ["failure", "success", "success"]
    assert lines[-1]["total"] == 3
    assert lines[-1]["failures"] == 1


def test_real_engine_single_file(tmp_path: Path) -> None:
    source = tmp_path / "widget.js"
    source.write_text("function widget() {\n  debugger;\n  return `a\n  ${b}`;\n}\n", encoding="utf-8")
    service = MinifyService(AppConfig())
    result = service.minify_file(source)
    assert result.content is not None
    assert "debugger" not in result.content
    assert "`a${b}`" in result.content


def test_real_engine_missing_file(tmp_path: Path) -> None:
    service = MinifyService(AppConfig())
    with pytest.raises(InputNotFoundError):
        service.minify_file(tmp_path / "missing.js")


def test_real_engine_deeply_nested_file_does_not_stop_batch(tmp_path: Path) -> None:
    (tmp_path / "a.js").write_text("var a = 1;\n", encoding="utf-8")
    (tmp_path / "b.js").write_text("var b = " + "[" * 1000 + "]" * 1000 + ";\n", encoding="utf-8")
    (tmp_path / "c.js").write_text("var c = 3;\n", encoding="utf-8")
    report = MinifyService(AppConfig()).minify_folder(tmp_path)
    assert report.total == 3
    assert [r.source.name for r in report.failed] == ["b.js"]
    assert report.failed[0].error_code == "PARSE_ERROR"
    assert (tmp_path / "c.min.js").read_text(encoding="utf-8") == "var c=3;\n"
