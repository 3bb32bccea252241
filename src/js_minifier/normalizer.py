"""Whitespace normalization for template literal text."""

from __future__ import annotations

import re
from typing import Sequence

from .models import LiteralSegment

TRAILING_BREAK_RE = re.compile(r"\s*[\r\n\t]\s*\Z")
LEADING_BREAK_RE = re.compile(r"\A\s*[\r\n\t]\s*")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str, *, is_first: bool, is_last: bool) -> str:
    if not is_last:
        text = TRAILING_BREAK_RE.sub("", text, count=1)
    if not is_first:
        text = LEADING_BREAK_RE.sub("", text, count=1)
    return WHITESPACE_RE.sub(" ", text)


def normalize_segments(segments: Sequence[LiteralSegment]) -> list[LiteralSegment]:
    """Trim line-break padding around substitutions and collapse whitespace.

    Text before a ``${`` loses trailing whitespace that contains a newline or
    tab, text after a ``}`` loses such leading whitespace, and every remaining
    whitespace run becomes a single space. Segments are updated in place and
    returned as a new list.
    """

    normalized: list[LiteralSegment] = []
    for segment in segments:
        segment.raw = normalize_text(segment.raw, is_first=segment.is_first, is_last=segment.is_last)
        if segment.cooked is not None:
            segment.cooked = normalize_text(
                segment.cooked, is_first=segment.is_first, is_last=segment.is_last
            )
        normalized.append(segment)
    return normalized


__all__ = ["normalize_segments", "normalize_text"]
