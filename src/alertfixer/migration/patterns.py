"""
Line classification for legacy `[UIAlertView showWithTitle:...]` calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from ..errors import PatternCompilationError

ALERT_VIEW_PATTERN = (
    r"^\s*(\[UIAlertView showWithTitle)(.*|\s*)(message:)(.*|\s*)(cancelButtonTitle:)"
    r"(.*|\s*)(otherButtonTitles:)(.*|\s*)(tapBlock:)(.*|\s*)"
)
INLINE_CALLBACK_MARKER = "{"
BLOCK_CLOSE_TOKEN = "}];"


@dataclass(frozen=True)
class MatchResult:
    is_alert_invocation: bool = False
    has_inline_callback: bool = False


NO_MATCH = MatchResult()


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise PatternCompilationError(f"Invalid structural pattern {pattern!r}: {exc}") from exc


_ALERT_VIEW = compile_pattern(ALERT_VIEW_PATTERN)


@lru_cache(maxsize=64)
def block_close_pattern(indent_width: int) -> re.Pattern[str]:
    """Pattern for a line holding exactly `indent_width` whitespace chars then `}];`."""
    return compile_pattern(r"^\s{%d}%s" % (indent_width, re.escape(BLOCK_CLOSE_TOKEN)))


def classify(line: str) -> MatchResult:
    if not line.strip():
        return NO_MATCH
    if not _ALERT_VIEW.search(line):
        return NO_MATCH
    return MatchResult(
        is_alert_invocation=True,
        has_inline_callback=INLINE_CALLBACK_MARKER in line,
    )


def leading_whitespace(line: str) -> str:
    """Text before the opening bracket of the call."""
    idx = line.find("[")
    if idx < 0:
        return ""
    return line[:idx]


__all__ = [
    "ALERT_VIEW_PATTERN",
    "BLOCK_CLOSE_TOKEN",
    "MatchResult",
    "block_close_pattern",
    "classify",
    "compile_pattern",
    "leading_whitespace",
]
