from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config.toml")
ENV_PREFIX = "MINIFY_"

USAGE_TEXT = "Specify the file: ?file=C:\\path\\to\\file.js\nOr minify folder: ?folder=C:\\path\\to\\folder"

__all__ = ["DEFAULT_CONFIG_PATH", "ENV_PREFIX", "USAGE_TEXT"]
