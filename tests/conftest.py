from __future__ import annotations

from pathlib import Path

import pytest

from js_minifier.config import AppConfig, RuntimeConfig
from js_minifier.errors import TransformError
from js_minifier.models import MinifyOptions


def _fake_transform(path: Path, options: MinifyOptions) -> str:
    text = path.read_text(encoding="utf-8")
    if "BROKEN" in text:
        raise TransformError(f"{path}: Unexpected token (1:0)", line=1, column=0)
    return text.strip().replace(" ", "")


@pytest.fixture
def transformer():
    return _fake_transform


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(runtime=RuntimeConfig(log_file=tmp_path / "logs" / "runs.jsonl"))


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    (root / "lib" / "vendor").mkdir(parents=True)
    (root / "app.js").write_text("var a = 1;\n", encoding="utf-8")
    (root / "app.min.js").write_text("stale", encoding="utf-8")
    (root / "lib" / "util.js").write_text("var b = 2;\n", encoding="utf-8")
    (root / "lib" / "vendor" / "dep.js").write_text("var c = 3;\n", encoding="utf-8")
    (root / "lib" / "notes.txt").write_text("not javascript", encoding="utf-8")
    return root
