from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping

from .constraint import DEFAULT_CONFIG_PATH
from .models import MinifyOptions


@dataclass(slots=True)
class MinifyConfig:
    remove_console: bool = True
    remove_debugger: bool = True
    remove_dead_code: bool = True
    strip_comments: bool = True
    source_type: Literal["module", "script"] = "module"

    def to_options(self) -> MinifyOptions:
        return MinifyOptions(
            remove_console=self.remove_console,
            remove_debugger=self.remove_debugger,
            remove_dead_code=self.remove_dead_code,
            strip_comments=self.strip_comments,
            source_type=self.source_type,
        )


@dataclass(slots=True)
class RuntimeConfig:
    source_suffix: str = ".js"
    minified_suffix: str = ".min.js"
    parallelism: int = 1
    log_file: Path | None = None


@dataclass(slots=True)
class APIConfig:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass(slots=True)
class AppConfig:
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    minify: MinifyConfig = field(default_factory=MinifyConfig)
    api: APIConfig = field(default_factory=APIConfig)


def _read_toml(path: Path) -> Mapping[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _section(raw: Mapping[str, object], name: str) -> Mapping[str, object] | None:
    data = raw.get(name)
    return data if isinstance(data, Mapping) else None


def _build_runtime(data: Mapping[str, object] | None) -> RuntimeConfig:
    if not data:
        return RuntimeConfig()
    log_file = str(data.get("log_file", "") or "")
    return RuntimeConfig(
        source_suffix=str(data.get("source_suffix", ".js")),
        minified_suffix=str(data.get("minified_suffix", ".min.js")),
        parallelism=max(1, int(data.get("parallelism", 1))),
        log_file=Path(log_file) if log_file else None,
    )


def _build_minify(data: Mapping[str, object] | None) -> MinifyConfig:
    if not data:
        return MinifyConfig()
    source_type = str(data.get("source_type", "module"))
    if source_type not in {"module", "script"}:
        raise ValueError(f"Unsupported source_type: {source_type!r}")
    return MinifyConfig(
        remove_console=bool(data.get("remove_console", True)),
        remove_debugger=bool(data.get("remove_debugger", True)),
        remove_dead_code=bool(data.get("remove_dead_code", True)),
        strip_comments=bool(data.get("strip_comments", True)),
        source_type=source_type,  # type: ignore[arg-type]
    )


def _build_api(data: Mapping[str, object] | None) -> APIConfig:
    if not data:
        return APIConfig()
    return APIConfig(host=str(data.get("host", "127.0.0.1")), port=int(data.get("port", 8000)))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or DEFAULT_CONFIG_PATH
    raw = _read_toml(path)
    return AppConfig(
        runtime=_build_runtime(_section(raw, "runtime")),
        minify=_build_minify(_section(raw, "minify")),
        api=_build_api(_section(raw, "api")),
    )


def dump_config(config: AppConfig) -> str:
    payload = {
        "runtime": {
            "source_suffix": config.runtime.source_suffix,
            "minified_suffix": config.runtime.minified_suffix,
            "parallelism": config.runtime.parallelism,
            "log_file": str(config.runtime.log_file) if config.runtime.log_file else "",
        },
        "minify": {
            "remove_console": config.minify.remove_console,
            "remove_debugger": config.minify.remove_debugger,
            "remove_dead_code": config.minify.remove_dead_code,
            "strip_comments": config.minify.strip_comments,
            "source_type": config.minify.source_type,
        },
        "api": {
            "host": config.api.host,
            "port": config.api.port,
        },
    }
    return json.dumps(payload, indent=2)


__all__ = [
    "APIConfig",
    "AppConfig",
    "MinifyConfig",
    "RuntimeConfig",
    "dump_config",
    "load_config",
]
