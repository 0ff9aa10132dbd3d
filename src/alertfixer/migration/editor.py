"""
Buffer-level rewriting of legacy alert calls.

The editor applies one rewrite per pass and restarts from the top of the
buffer afterwards, since a block rewrite shifts every later index. It stops
after a full pass that finds nothing left to rewrite.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, MutableSequence, Optional, Set

from ..config import EditorConfig
from ..errors import AlertFixerError, PatternCompilationError, UnterminatedBlockError
from .blocks import capture_block, find_block_end
from .fields import extract_fields
from .patterns import classify, leading_whitespace
from .rewriter import build_replacement

log = logging.getLogger(__name__)

CompletionHandler = Callable[[Optional[AlertFixerError]], None]


@dataclass
class EditReport:
    rewrites: int = 0
    inline_rewrites: int = 0
    block_rewrites: int = 0
    unterminated: List[int] = field(default_factory=list)
    details: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.rewrites > 0


def line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n") or line.endswith("\r"):
        return line[-1]
    return ""


def line_tail(line: str) -> str:
    """Trailing whitespace of `line`, terminator included."""
    return line[len(line.rstrip()):]


class BufferEditor:
    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()

    def run(self, buffer: MutableSequence[str]) -> EditReport:
        report = EditReport()
        skipped: Set[int] = set()
        while self._rewrite_first(buffer, report, skipped):
            pass
        return report

    def _rewrite_first(self, buffer: MutableSequence[str], report: EditReport, skipped: Set[int]) -> bool:
        for index, line in enumerate(buffer):
            if index in skipped:
                continue
            match = classify(line)
            if not match.is_alert_invocation:
                continue
            if not match.has_inline_callback:
                self._rewrite_inline(buffer, index, report)
                return True
            if self._rewrite_block(buffer, index, report, skipped):
                return True
        return False

    def _rewrite_inline(self, buffer: MutableSequence[str], index: int, report: EditReport) -> None:
        line = buffer[index]
        replacement = build_replacement(leading_whitespace(line), extract_fields(line), None)
        buffer[index] = replacement + line_tail(line)
        report.rewrites += 1
        report.inline_rewrites += 1
        report.details.append(f"Rewrote UIAlertView call at line {index + 1}")
        log.debug("Rewrote inline alert at line %d", index + 1)

    def _rewrite_block(
        self,
        buffer: MutableSequence[str],
        index: int,
        report: EditReport,
        skipped: Set[int],
    ) -> bool:
        line = buffer[index]
        indent = leading_whitespace(line)
        newline = line_ending(line) or "\n"
        end = find_block_end(buffer, index, len(indent))
        if end is None:
            return self._handle_unterminated(buffer, index, report, skipped)

        span = capture_block(buffer, index, end)
        replacement = build_replacement(indent, extract_fields(line), span.captured_body, newline=newline)
        replacement += line_tail(buffer[end])
        del buffer[span.start_line : span.end_line + 1]
        buffer.insert(span.start_line, replacement)
        report.rewrites += 1
        report.block_rewrites += 1
        report.details.append(
            f"Rewrote UIAlertView call with tap block at lines {span.start_line + 1}-{span.end_line + 1}"
        )
        log.debug("Rewrote alert with tap block at lines %d-%d", span.start_line + 1, span.end_line + 1)
        return True

    def _handle_unterminated(
        self,
        buffer: MutableSequence[str],
        index: int,
        report: EditReport,
        skipped: Set[int],
    ) -> bool:
        policy = self.config.on_unterminated
        message = f"Tap block opened at line {index + 1} has no closing '}}];' at the same indent"
        if policy == "error":
            raise UnterminatedBlockError(message, line=index + 1)

        report.unterminated.append(index)
        if policy == "collapse":
            line = buffer[index]
            indent = leading_whitespace(line)
            newline = line_ending(line) or "\n"
            buffer[index] = build_replacement(indent, extract_fields(line), "", newline=newline) + line_tail(line)
            report.rewrites += 1
            report.block_rewrites += 1
            report.warnings.append(f"{message}; rewrote the call with an empty tap block.")
            log.warning("%s; collapsed to an empty tap block", message)
            return True

        skipped.add(index)
        report.warnings.append(f"{message}; left unchanged, convert manually.")
        log.warning("%s; left unchanged", message)
        return False


def perform(
    buffer: MutableSequence[str],
    completion_handler: CompletionHandler,
    *,
    config: Optional[EditorConfig] = None,
) -> Optional[EditReport]:
    """
    Rewrite every legacy alert in `buffer` and report back once.

    `completion_handler` receives None on success or the AlertFixerError that
    stopped the pass. A PatternCompilationError is fatal and is raised instead.
    """

    editor = BufferEditor(config)
    try:
        report = editor.run(buffer)
    except PatternCompilationError:
        raise
    except AlertFixerError as exc:
        completion_handler(exc)
        return None
    completion_handler(None)
    return report


__all__ = ["BufferEditor", "CompletionHandler", "EditReport", "line_ending", "line_tail", "perform"]
