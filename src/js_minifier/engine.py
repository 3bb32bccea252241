"""JavaScript transformation engine.

Sources are parsed with esprima to locate the constructs the minify preset
rewrites. The rewrites are spliced into the original text, which is then
passed through rjsmin to drop comments and redundant whitespace.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import esprima
import rjsmin
from esprima.error_handler import Error as EsprimaError

from .errors import InputNotFoundError, InputUnreadableError, TransformError
from .models import LiteralSegment, MinifyOptions, SegmentPass
from .normalizer import normalize_segments

logger = logging.getLogger(__name__)

EMPTY_STATEMENT = ";"
VOID_EXPRESSION = "(void 0)"


@dataclass(slots=True)
class _Edit:
    start: int
    end: int
    text: str = ""
    keep: tuple[int, int] | None = None


def _console_root(callee: Any) -> bool:
    node = callee
    while node is not None and node.type == "MemberExpression":
        node = node.object
    return node is not None and node.type == "Identifier" and node.name == "console"


def _is_console_call(node: Any) -> bool:
    return node is not None and node.type == "CallExpression" and (
        node.callee.type == "MemberExpression" and _console_root(node.callee)
    )


class _EditCollector:
    """esprima node delegate that records the rewrites of the minify preset."""

    def __init__(self, source: str, options: MinifyOptions, passes: Sequence[SegmentPass]) -> None:
        self._source = source
        self._options = options
        self._passes = passes
        self._nonce = secrets.token_hex(6)
        self.edits: list[_Edit] = []
        self.shielded: dict[str, str] = {}

    def __call__(self, node: Any, metadata: Any) -> None:
        visitor = getattr(self, f"visit_{node.type}", None)
        if visitor is not None:
            visitor(node)

    def visit_DebuggerStatement(self, node: Any) -> None:
        if self._options.remove_debugger:
            self._replace(node, EMPTY_STATEMENT)

    def visit_ExpressionStatement(self, node: Any) -> None:
        if self._options.remove_console and _is_console_call(node.expression):
            # without a trailing semicolon the call shares the statement's range
            call = (node.expression.range[0], node.expression.range[1])
            self.edits = [edit for edit in self.edits if (edit.start, edit.end) != call]
            self._replace(node, EMPTY_STATEMENT)

    def visit_CallExpression(self, node: Any) -> None:
        if self._options.remove_console and _is_console_call(node):
            self._replace(node, VOID_EXPRESSION)

    def visit_IfStatement(self, node: Any) -> None:
        if not self._options.remove_dead_code:
            return
        test = node.test
        if test.type != "Literal" or not isinstance(test.value, bool):
            return
        branch = node.consequent if test.value else node.alternate
        start, end = node.range
        if branch is None:
            self.edits.append(_Edit(start, end, EMPTY_STATEMENT))
        else:
            self.edits.append(_Edit(start, end, keep=(branch.range[0], branch.range[1])))

    def visit_TemplateLiteral(self, node: Any) -> None:
        quasis = list(node.quasis)
        segments = [
            LiteralSegment(raw=quasi.value.raw, cooked=quasi.value.cooked, index=index, count=len(quasis))
            for index, quasi in enumerate(quasis)
        ]
        for template_pass in self._passes:
            segments = template_pass(segments)
        for quasi, segment in zip(quasis, segments):
            # range starts at the opening backtick or the closing brace of ${}
            start = quasi.range[0] + 1
            end = start + len(quasi.value.raw)
            if self._source[start:end] != quasi.value.raw:
                logger.debug("Template text at offset %d does not match its source; left as is", start)
                continue
            self.edits.append(_Edit(start, end, self._shield(segment.raw)))

    def _replace(self, node: Any, text: str) -> None:
        start, end = node.range
        self.edits.append(_Edit(start, end, text))

    def _shield(self, raw: str) -> str:
        placeholder = f'"__js_minifier_{self._nonce}_{len(self.shielded)}__"'
        self.shielded[placeholder] = raw
        return placeholder


def _render(source: str, start: int, end: int, edits: Sequence[_Edit]) -> str:
    pieces: list[str] = []
    cursor = start
    for edit in edits:
        if edit.start < cursor or edit.end > end:
            continue
        pieces.append(source[cursor : edit.start])
        if edit.keep is not None:
            pieces.append(_render(source, edit.keep[0], edit.keep[1], edits))
        else:
            pieces.append(edit.text)
        cursor = edit.end
    pieces.append(source[cursor:end])
    return "".join(pieces)


def _segment_passes(options: MinifyOptions) -> list[SegmentPass]:
    passes: list[SegmentPass] = []
    if options.normalize_templates:
        passes.append(normalize_segments)
    passes.extend(options.template_passes)
    return passes


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise InputNotFoundError(str(exc)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnreadableError(str(exc)) from exc


def minify_source(source: str, options: MinifyOptions | None = None, *, filename: str = "<source>") -> str:
    opts = options or MinifyOptions()
    collector = _EditCollector(source, opts, _segment_passes(opts))
    parse = esprima.parseModule if opts.source_type == "module" else esprima.parseScript
    try:
        parse(source, {"range": True}, collector)
    except EsprimaError as exc:
        raise TransformError(
            f"{filename}: {exc}",
            line=getattr(exc, "lineNumber", None),
            column=getattr(exc, "column", None),
        ) from exc
    except RecursionError as exc:
        raise TransformError(f"{filename}: source is nested too deeply to parse") from exc
    except Exception as exc:
        raise TransformError(f"{filename}: {type(exc).__name__}: {exc}") from exc

    edits = sorted(collector.edits, key=lambda edit: (edit.start, -edit.end))
    rewritten = _render(source, 0, len(source), edits)
    code = rjsmin.jsmin(rewritten, keep_bang_comments=not opts.strip_comments).strip()
    for placeholder, raw in collector.shielded.items():
        code = code.replace(placeholder, raw)
    return code


def transform(path: Path, options: MinifyOptions | None = None) -> str:
    """Minify the file at *path* and return the produced source text."""

    logger.info("Working on %s", path)
    try:
        source = read_source(path)
        return minify_source(source, options, filename=str(path))
    except TransformError as exc:
        logger.exception(
            "Encountered error transforming %s: %s (code=%s, line=%s, column=%s)",
            path,
            exc,
            exc.code,
            exc.line,
            exc.column,
        )
        raise
    except (InputNotFoundError, InputUnreadableError) as exc:
        logger.exception("Encountered error reading %s: %s (code=%s)", path, exc, exc.code)
        raise


__all__ = ["transform", "minify_source", "read_source"]
