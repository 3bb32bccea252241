from pathlib import Path

from typer.testing import CliRunner

from js_minifier.cli import app

runner = CliRunner()


def test_file_command_prints_code(tmp_path: Path) -> None:
    source = tmp_path / "tool.js"
    source.write_text("var tool = 1; // note\n", encoding="utf-8")
    result = runner.invoke(app, ["file", str(source), "--config", str(tmp_path / "config.toml")])
    assert result.exit_code == 0
    assert "var tool=1;" in result.output


def test_file_command_fails_for_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["file", str(tmp_path / "missing.js"), "--config", str(tmp_path / "c.toml")])
    assert result.exit_code == 1
    assert "NOT_FOUND" in result.output


def test_folder_command_summarises(tmp_path: Path) -> None:
    root = tmp_path / "js"
    root.mkdir()
    (root / "one.js").write_text("var one = 1;\n", encoding="utf-8")
    (root / "two.js").write_text("var two = 2;\n", encoding="utf-8")
    result = runner.invoke(app, ["folder", str(root), "--config", str(tmp_path / "config.toml")])
    assert result.exit_code == 0
    assert "2 succeeded, 0 failed" in result.output
    assert (root / "one.min.js").exists()


def test_folder_command_missing_root(tmp_path: Path) -> None:
    result = runner.invoke(app, ["folder", str(tmp_path / "nope"), "--config", str(tmp_path / "config.toml")])
    assert result.exit_code == 1
    assert "WALK_FAILED" in result.output


def test_show_config(tmp_path: Path) -> None:
    result = runner.invoke(app, ["show-config", "--config", str(tmp_path / "config.toml")])
    assert result.exit_code == 0
    assert '"port": 8000' in result.output
