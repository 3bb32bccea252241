"""Local JavaScript minification server."""

from .config import AppConfig, load_config
from .core import MinifyService
from .engine import minify_source, transform
from .models import BatchReport, FileResult, LiteralSegment, MinifyOptions
from .normalizer import normalize_segments

__all__ = [
    "AppConfig",
    "load_config",
    "BatchReport",
    "FileResult",
    "LiteralSegment",
    "MinifyOptions",
    "MinifyService",
    "minify_source",
    "normalize_segments",
    "transform",
]
