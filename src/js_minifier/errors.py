"""Error types raised while minifying sources."""

from __future__ import annotations

NO_ERROR_PLACEHOLDER = "...No usable error was specified..."


class MinifyError(RuntimeError):
    code = "MINIFY_ERROR"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class InputNotFoundError(MinifyError):
    code = "NOT_FOUND"


class InputUnreadableError(MinifyError):
    code = "UNREADABLE"


class TransformError(MinifyError):
    """Raised when the source cannot be parsed or rewritten."""

    code = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.line = line
        self.column = column


class OutputWriteError(MinifyError):
    code = "WRITE_FAILED"


class WalkError(MinifyError):
    code = "WALK_FAILED"


def describe_error(exc: BaseException | None) -> str:
    """Render an error as ``ClassName: message``."""

    if exc is None:
        return NO_ERROR_PLACEHOLDER
    message = str(exc)
    if not message:
        return NO_ERROR_PLACEHOLDER
    return f"{type(exc).__name__}: {message}"


__all__ = [
    "MinifyError",
    "InputNotFoundError",
    "InputUnreadableError",
    "TransformError",
    "OutputWriteError",
    "WalkError",
    "NO_ERROR_PLACEHOLDER",
    "describe_error",
]
